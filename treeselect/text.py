from __future__ import annotations


def normalize_whitespace(value: str) -> str:
    return " ".join(value.split())


def is_blank(value: str) -> bool:
    return not value or value.isspace()
