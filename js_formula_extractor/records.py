from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Section(Enum):
    """Supported sections of a transaction definition.

    Each member carries the top-level array key it is read from and the
    folder name its formulas are written to.
    """

    HEADER_FIELDS = ('Fields', 'Header Fields')
    LINE_FIELDS = ('LineFields', 'Line Fields')

    def __init__(self, array_key: str, title: str):
        self.array_key = array_key
        self.title = title


@dataclass(frozen=True)
class ExtractedField:
    section: Section
    field_id: str
    label: str
    type: str
    trigger: str
    formula: str
    participating_fields: Tuple[str, ...] = ()

    @property
    def file_name(self) -> str:
        return f"{self.label}.js"
