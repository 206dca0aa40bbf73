from __future__ import annotations

import sys
from typing import Optional, Union

from bs4 import BeautifulSoup


def read_html(path: Optional[str] = None) -> bytes:
    """
    Read a saved HTML document as raw bytes. Reads stdin when path is None or "-".
    Decoding is left to BeautifulSoup, which honours the page's declared charset.
    Raises OSError if the file cannot be read.
    """
    if path is None or path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as fh:
        return fh.read()


def parse_document(html: Union[str, bytes]) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")
