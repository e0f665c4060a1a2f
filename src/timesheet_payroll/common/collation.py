"""Locale-aware string ordering and matching.

Ordering is based on the Unicode Collation Algorithm (DUCET root collation via
``pyuca``). Locales whose CLDR tailoring reorders their native script ahead of
Latin (ru, uk, be, ...) get that reordering on the first letter of a string, so
Cyrillic names sort before Latin ones and "ё" sorts together with "е".

The locale is always passed explicitly; nothing here reads the process locale.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Iterable, Optional, TypeVar

from pyuca import Collator

from ..core.constants import DEFAULT_LOCALE

T = TypeVar("T")

_NATIVE_SCRIPT = {
    "ru": "CYRILLIC",
    "uk": "CYRILLIC",
    "be": "CYRILLIC",
    "bg": "CYRILLIC",
    "kk": "CYRILLIC",
    "sr": "CYRILLIC",
    "el": "GREEK",
}


@lru_cache(maxsize=1)
def _root_collator() -> Collator:
    return Collator()


@dataclass(frozen=True)
class Collation:
    locale: str = DEFAULT_LOCALE

    @property
    def language(self) -> str:
        return self.locale.replace("-", "_").split("_")[0].lower()

    def key(self, text: Optional[str]) -> tuple:
        text = (text or "").strip()
        return (self._script_rank(text), _root_collator().sort_key(text), text)

    def sorted(self, items: Iterable[T], key: Callable[[T], Optional[str]] = lambda x: x) -> list[T]:
        return sorted(items, key=lambda item: self.key(key(item)))

    def contains(self, text: Optional[str], fragment: str) -> bool:
        """Case-insensitive substring match."""
        if not fragment:
            return False
        return _fold(fragment) in _fold(text or "")

    def equals(self, left: Optional[str], right: Optional[str]) -> bool:
        return _fold(left or "") == _fold(right or "")

    def _script_rank(self, text: str) -> int:
        native = _NATIVE_SCRIPT.get(self.language)
        if native is None:
            return 0
        for ch in text:
            if ch.isalpha():
                return 0 if unicodedata.name(ch, "").startswith(native) else 1
        return 1


def _fold(text: str) -> str:
    return unicodedata.normalize("NFC", text).casefold()
