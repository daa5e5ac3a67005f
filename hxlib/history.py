"""A list of previously typed lines with a movable cursor and optional size limit."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

GROW_SIZE = 50


class HistoryFlags(enum.IntFlag):
    """Flags carried by a saved history state."""

    NONE = 0
    STIFLED = 0x01


@dataclass
class HistoryEntry:
    """One remembered line plus caller data attached to it."""

    line: str
    data: Any = None


@dataclass
class HistoryState:
    """A snapshot of a history list, its cursor and its flags."""

    entries: list[HistoryEntry] = field(default_factory=list)
    offset: int = 0
    length: int = 0
    size: int = 0
    flags: HistoryFlags = HistoryFlags.NONE


class History:
    """Ordered history of lines, addressable by position or by logical number."""

    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []
        self._stifled = False
        self._max_entries = 0
        self._offset = 0
        self._size = 0
        self.base = 1

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def _allocated(self) -> bool:
        return self._size > 0

    def get_state(self) -> HistoryState:
        """Return a snapshot of the list, the cursor and the stifled flag."""
        flags = HistoryFlags.STIFLED if self._stifled else HistoryFlags.NONE
        return HistoryState(
            entries=list(self._entries),
            offset=self._offset,
            length=len(self._entries),
            size=self._size,
            flags=flags,
        )

    def set_state(self, state: HistoryState) -> None:
        """Replace the list and cursor with those of ``state``."""
        if state.length != len(state.entries):
            raise ValueError("state length does not match its entries")
        self._entries = list(state.entries)
        self._offset = state.offset
        self._size = state.size
        if state.flags & HistoryFlags.STIFLED:
            self._stifled = True

    def using_history(self) -> None:
        """Move the cursor past the last entry."""
        self._offset = len(self._entries)

    def total_bytes(self) -> int:
        """Return the number of bytes taken by all remembered lines."""
        return sum(len(entry.line.encode()) for entry in self._entries)

    def where(self) -> int:
        """Return the cursor position."""
        return self._offset

    def set_pos(self, pos: int) -> bool:
        """Move the cursor to absolute position ``pos``; return False if out of range."""
        if pos > len(self._entries) or pos < 0 or not self._allocated:
            return False
        self._offset = pos
        return True

    def entries(self) -> list[HistoryEntry]:
        """Return the entries, oldest first."""
        return list(self._entries)

    def _at(self, index: int) -> HistoryEntry | None:
        if 0 <= index < len(self._entries):
            return self._entries[index]
        return None

    def current(self) -> HistoryEntry | None:
        """Return the entry under the cursor, or None at the end."""
        if self._offset == len(self._entries) or not self._allocated:
            return None
        return self._at(self._offset)

    def previous(self) -> HistoryEntry | None:
        """Step the cursor back and return that entry, or None at the start."""
        if not self._offset:
            return None
        self._offset -= 1
        return self._at(self._offset)

    def next(self) -> HistoryEntry | None:
        """Step the cursor forward and return that entry, or None past the end."""
        if self._offset >= len(self._entries):
            return None
        self._offset += 1
        return self._at(self._offset)

    def get(self, offset: int) -> HistoryEntry | None:
        """Return the entry with logical number ``offset`` (counted from ``base``)."""
        if not self._allocated:
            return None
        return self._at(offset - self.base)

    def add(self, line: str) -> None:
        """Append ``line``; a full stifled history drops its oldest entry first."""
        if self._stifled and len(self._entries) == self._max_entries:
            if not self._entries:
                return
            del self._entries[0]
            self.base += 1
        elif self._size == 0:
            self._size = GROW_SIZE
        elif len(self._entries) == self._size - 1:
            self._size += GROW_SIZE
        self._entries.append(HistoryEntry(line))

    def replace(self, which: int, line: str, data: Any = None) -> HistoryEntry | None:
        """Put a new entry at position ``which``; return the old one or None."""
        if not 0 <= which < len(self._entries):
            return None
        old = self._entries[which]
        self._entries[which] = HistoryEntry(line, data)
        return old

    def remove(self, which: int) -> HistoryEntry | None:
        """Take the entry at position ``which`` out and return it, or None."""
        if not 0 <= which < len(self._entries):
            return None
        return self._entries.pop(which)

    def stifle(self, max_entries: int) -> None:
        """Keep at most ``max_entries`` lines from now on, dropping the oldest."""
        max_entries = max(max_entries, 0)
        excess = len(self._entries) - max_entries
        if excess > 0:
            del self._entries[:excess]
            self.base = excess
        self._stifled = True
        self._max_entries = max_entries

    def unstifle(self) -> int:
        """Lift the limit; return minus the old limit if one was set, else the limit."""
        if self._stifled:
            self._stifled = False
            return -self._max_entries
        return self._max_entries

    def is_stifled(self) -> bool:
        """Return whether a size limit is in force."""
        return self._stifled

    def clear(self) -> None:
        """Forget every entry and reset the cursor."""
        self._entries.clear()
        self._offset = 0