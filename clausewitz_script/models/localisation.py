"""Localisation file model (``l_<language>:`` header plus ``key:version "value"`` lines)."""
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .ast import Comment


@dataclass(frozen=True)
class LocalisationPair:
    """One localisation entry. ``value`` is stored unescaped."""
    key: str
    value: str
    version: Optional[int] = None


LocalisationItem = Union[LocalisationPair, Comment]


@dataclass(frozen=True)
class LocalisationFile:
    language: str
    items: Tuple[LocalisationItem, ...] = ()

    def entries(self) -> dict:
        """Map of key -> value, later duplicates win"""
        return {item.key: item.value for item in self.items if isinstance(item, LocalisationPair)}
