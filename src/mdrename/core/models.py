"""Data models for rename planning"""

from pydantic import BaseModel


class RenameEntry(BaseModel):
    """One qualifying directory entry and the name it should carry."""
    source:   str
    target:   str
    position: int                   # 1-based sequence number in collated order

    @property
    def changed(self) -> bool:
        return self.source != self.target


class RenameError(OSError):
    """A rename inside the proposals directory failed; chained to the OS error."""

    def __init__(self, source: str, target: str, cause: OSError):
        super().__init__(f"Cannot rename {source!r} -> {target!r}: {cause}")
        self.source = source
        self.target = target
