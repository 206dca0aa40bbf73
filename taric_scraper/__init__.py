"""
TARIC description scraper package.

Exports:
- DescriptionRecord: dataclass for one (index, language, text) description row
- extract_and_format_descriptions: extract descriptions from a saved page, format as SQL and copy to clipboard
"""

from .types import DescriptionRecord
from .cli import extract_and_format_descriptions

__all__ = ["DescriptionRecord", "extract_and_format_descriptions"]
