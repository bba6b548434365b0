"""Locale-aware ordering of filenames via the Unicode Collation Algorithm"""

from functools import lru_cache

from pyuca import Collator


@lru_cache(maxsize=1)
def _collator() -> Collator:
    """Load the DUCET table once; parsing allkeys.txt is slow."""
    return Collator()


def collation_key(name: str) -> tuple:
    """Sort key: UCA weights first, raw string as a final tie-breaker."""
    return (_collator().sort_key(name), name)


def collate(names) -> list[str]:
    """Return names in collated order (digits < letters, lower < upper case)."""
    return sorted(names, key=collation_key)
