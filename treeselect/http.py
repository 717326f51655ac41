from __future__ import annotations

import asyncio
from dataclasses import dataclass
import logging
from typing import Awaitable, Callable

import aiohttp

from treeselect.config import FetchConfig, ParseOptions
from treeselect.html_parser import parse_html
from treeselect.models import Node

AsyncFetcher = Callable[[str], Awaitable[str]]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FetchError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


async def fetch_text_async(
    url: str,
    session: aiohttp.ClientSession,
    config: FetchConfig | None = None,
) -> str:
    fetch_config = config or FetchConfig()
    timeout_config = aiohttp.ClientTimeout(total=fetch_config.timeout_seconds)
    try:
        async with session.get(
            url,
            headers={"User-Agent": fetch_config.user_agent},
            timeout=timeout_config,
        ) as response:
            response.raise_for_status()
            return await response.text(errors="replace")
    except Exception as exc:
        logger.debug("Fetch failed for %s: %s", url, exc)
        raise FetchError(f"Failed to fetch {url}") from exc


def build_async_fetcher(
    session: aiohttp.ClientSession, config: FetchConfig | None = None
) -> AsyncFetcher:
    async def fetch(url: str) -> str:
        return await fetch_text_async(url, session, config)

    return fetch


async def load_url_async(
    url: str,
    fetcher: AsyncFetcher | None = None,
    options: ParseOptions | None = None,
    config: FetchConfig | None = None,
) -> Node:
    if fetcher is not None:
        if config is not None:
            raise ValueError("config applies only to the built-in fetcher")
        return parse_html(await fetcher(url), options)
    async with aiohttp.ClientSession() as session:
        session_fetcher = build_async_fetcher(session, config=config)
        return parse_html(await session_fetcher(url), options)


def load_url(
    url: str,
    options: ParseOptions | None = None,
    config: FetchConfig | None = None,
) -> Node:
    return asyncio.run(load_url_async(url, options=options, config=config))
