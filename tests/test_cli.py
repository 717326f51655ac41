from __future__ import annotations

from pathlib import Path

import pytest

from treeselect import cli
from treeselect.html_parser import parse_html

PAGE = """
<html>
  <body>
    <div class="card" id="first"><h2>One</h2><p>First   card</p></div>
    <div class="card"><h2>Two</h2><p>Second card</p></div>
    <footer><p>Footer</p></footer>
  </body>
</html>
"""


@pytest.fixture(autouse=True)
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.delenv("TREESELECT_RESET", raising=False)


@pytest.fixture()
def page(tmp_path: Path) -> Path:
    path = tmp_path / "page.html"
    path.write_text(PAGE, encoding="utf-8")
    return path


def test_cli_prints_text_of_tag_matches(
    page: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert cli.main([str(page), "--tag", "h2", "--text"]) == 0

    assert capsys.readouterr().out.splitlines() == ["One", "Two"]


def test_cli_selects_by_class_with_normalized_text(
    page: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert cli.main([str(page), "--class", "card", "--normalize"]) == 0

    assert capsys.readouterr().out.splitlines() == ["OneFirst card", "TwoSecond card"]


def test_cli_selects_by_attribute(
    page: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert cli.main([str(page), "--attr", "id=first"]) == 0

    assert capsys.readouterr().out.splitlines() == ['<div class="card" id="first">']


def test_cli_sole_fails_on_multiple_matches(
    page: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert cli.main([str(page), "--tag", "div", "--sole"]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Expected exactly 1 element(s), got 2" in captured.err


def test_cli_reports_missing_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert cli.main([str(tmp_path / "missing.html"), "--tag", "p"]) == 1

    assert capsys.readouterr().err.startswith("treeselect:")


def test_cli_loads_urls_through_http(
    page: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    requested: list[tuple[str, set[str]]] = []

    def fake_load_url(url: str, **kwargs: object):
        requested.append((url, set(kwargs)))
        return parse_html("<p>remote</p>")

    monkeypatch.setattr(cli, "load_url", fake_load_url)

    assert cli.main(["https://example.test/", "--tag", "p", "--text"]) == 0

    assert requested == [("https://example.test/", {"options", "config"})]
    assert capsys.readouterr().out.splitlines() == ["remote"]


def test_cli_requires_a_query(page: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(page)])

    assert excinfo.value.code == 2


def test_cli_attr_with_empty_value_matches_only_empty_attributes(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "images.html"
    path.write_text('<img alt=""><img alt="logo"><img>', encoding="utf-8")

    assert cli.main([str(path), "--attr", "alt="]) == 0

    assert capsys.readouterr().out.splitlines() == ['<img alt="">']


def test_cli_attr_without_value_matches_any_value(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "images.html"
    path.write_text('<img alt=""><img alt="logo"><img>', encoding="utf-8")

    assert cli.main([str(path), "--attr", "alt"]) == 0

    assert capsys.readouterr().out.splitlines() == ['<img alt="">', '<img alt="logo">']


def test_cli_reports_undecodable_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "latin1.html"
    path.write_bytes("<p>café</p>".encode("latin-1"))

    assert cli.main([str(path), "--tag", "p", "--text"]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("treeselect:")
