from __future__ import annotations

from typing import List, Union

from bs4.element import Tag

from .source import parse_document
from .types import DescriptionRecord, LANGUAGE_CODE


# Description cells inside the expanded chapter headings of the TARIC consultation page.
DESCRIPTION_SELECTOR = ".section_heading .tddescription"

Document = Union[str, bytes, Tag]


def _text(el: Tag) -> str:
    # Concatenated text of all descendants, like the DOM's textContent.
    return el.get_text().strip()


def _as_tree(document: Document) -> Tag:
    if isinstance(document, (str, bytes)):
        return parse_document(document)
    return document


def select_descriptions(document: Document, selector: str = DESCRIPTION_SELECTOR) -> List[Tag]:
    """
    Return the description elements matched by selector, in document order.
    An element nested under several section headings is returned once.
    """
    return _as_tree(document).select(selector)


def extract_descriptions(
    document: Document, selector: str = DESCRIPTION_SELECTOR
) -> List[DescriptionRecord]:
    records: List[DescriptionRecord] = []
    for idx, el in enumerate(select_descriptions(document, selector), start=1):
        records.append(DescriptionRecord(index=idx, text=_text(el), language=LANGUAGE_CODE))
    return records
