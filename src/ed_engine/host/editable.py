"""Convert between editable HTML regions and buffer lines."""

from __future__ import annotations

import html
from html.parser import HTMLParser
from typing import Iterable, List

BLOCK_TAGS = frozenset({"p", "div", "pre", "h1", "h2", "h3", "h4", "h5", "h6"})


class _RenderedTextParser(HTMLParser):
    """Collects text content, turning ``<br>`` and block ends into newlines."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.chunks: List[str] = []

    def handle_starttag(self, tag: str, attrs) -> None:
        del attrs
        if tag == "br":
            self.chunks.append("\n")

    def handle_endtag(self, tag: str) -> None:
        if tag in BLOCK_TAGS:
            self.chunks.append("\n")

    def handle_data(self, data: str) -> None:
        self.chunks.append(data)


def html_to_lines(markup: str) -> List[str]:
    """Rendered text of ``markup``, trimmed and split into lines."""

    parser = _RenderedTextParser()
    parser.feed(markup)
    parser.close()
    return "".join(parser.chunks).strip().split("\n")


def escape_line(line: str) -> str:
    return html.escape(line, quote=False).replace("\u00a0", "&nbsp;")


def lines_to_html(lines: Iterable[str]) -> str:
    return "<br>".join(escape_line(line) for line in lines)


__all__ = ["BLOCK_TAGS", "html_to_lines", "lines_to_html", "escape_line"]
