from dataclasses import dataclass


LANGUAGE_CODE = "EN"


@dataclass
class DescriptionRecord:
    index: int
    text: str
    language: str = LANGUAGE_CODE
