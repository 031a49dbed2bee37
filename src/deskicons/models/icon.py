"""Resolved icon dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class IconFormat(Enum):
    """Image formats the front end knows how to draw."""

    SVG = "svg"
    PNG = "png"
    FALLBACK = "fallback"


@dataclass(frozen=True, slots=True)
class ResolvedIcon:
    """Outcome of resolving an icon reference.

    ``path`` is None only for the fallback placeholder.
    """

    path: Path | None
    format: IconFormat

    @property
    def is_fallback(self) -> bool:
        return self.format is IconFormat.FALLBACK


FALLBACK_ICON = ResolvedIcon(path=None, format=IconFormat.FALLBACK)
