"""
Packing units.

The assembler packs two kinds of units into chunks: whole pages (the
cross-page buffer) and single sentences (inside an oversized page). Both
carry the page they came from, so the packing routine does not care which
kind it is handling.
"""

from dataclasses import dataclass
from typing import Literal, Union


@dataclass(frozen=True)
class PageUnit:
    page_number: int
    text: str
    kind: Literal["page"] = "page"


@dataclass(frozen=True)
class SentenceUnit:
    page_number: int
    text: str
    kind: Literal["sentence"] = "sentence"


Unit = Union[PageUnit, SentenceUnit]
