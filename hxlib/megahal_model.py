"""Word segmentation, symbol dictionary and n-gram trees for a MegaHAL-style model."""

from __future__ import annotations

import string
import struct
from bisect import bisect_left
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from operator import attrgetter
from typing import BinaryIO

COOKIE = b"MegaHALv8"
DEFAULT_ORDER = 5
ERROR_WORD = "<ERROR>"
FIN_WORD = "<FIN>"
FIN_SYMBOL = 1
MAX_COUNT = 65535

_ALPHA = frozenset(string.ascii_letters)
_DIGIT = frozenset(string.digits)
_ENCODING = "latin-1"

_NODE = struct.Struct("<HIHH")
_U8 = struct.Struct("<B")
_U32 = struct.Struct("<I")


def _isalpha(ch: str) -> bool:
    return ch in _ALPHA


def _isdigit(ch: str) -> bool:
    return ch in _DIGIT


def _isalnum(ch: str) -> bool:
    return ch in _ALPHA or ch in _DIGIT


def wordcmp(word1: str, word2: str) -> int:
    """Compare two words; negative, zero or positive like a C comparison."""
    for a, b in zip(word1, word2):
        if a != b:
            return ord(a) - ord(b)
    if len(word1) < len(word2):
        return -1
    if len(word1) > len(word2):
        return 1
    return 0


def boundary(text: str, position: int) -> bool:
    """Return whether a word boundary falls in ``text`` just before ``position``."""
    if position < 0 or position > len(text):
        raise ValueError(f"position {position} outside text of length {len(text)}")
    if not position:
        return False
    if position == len(text):
        return True

    current = text[position]
    prev = text[position - 1]
    following = text[position + 1] if position + 1 < len(text) else ""

    if current == "'" and _isalpha(prev) and _isalpha(following):
        return False
    if position > 1 and prev == "'" and _isalpha(text[position - 2]) and _isalpha(current):
        return False
    if _isalpha(current) and not _isalpha(prev):
        return True
    if not _isalpha(current) and _isalpha(prev):
        return True
    return _isdigit(current) != _isdigit(prev)


def make_words(text: str) -> list[str]:
    """Split ``text`` into words and separators, ending with sentence punctuation."""
    words: list[str] = []
    if not text:
        return words

    offset = 0
    while True:
        if boundary(text, offset):
            words.append(text[:offset])
            if offset == len(text):
                break
            text = text[offset:]
            offset = 0
        else:
            offset += 1

    last = words[-1]
    if _isalnum(last[0]):
        words.append(".")
    elif last[0] not in "!.?":
        words[-1] = "."
    return words


class Dictionary:
    """Words numbered in the order they were added, searchable in sorted order."""

    def __init__(self, initialize: bool = True) -> None:
        self._initialize = initialize
        self._entries: list[str] = []
        self._sorted: list[str] = []
        self._index: list[int] = []
        if initialize:
            self._add_dummies()

    def _add_dummies(self) -> None:
        self.add_word(ERROR_WORD)
        self.add_word(FIN_WORD)

    def search(self, word: str) -> tuple[int, bool]:
        """Return the sorted position of ``word`` and whether it is present."""
        position = bisect_left(self._sorted, word)
        found = position < len(self._sorted) and self._sorted[position] == word
        return position, found

    def add_word(self, word: str) -> int:
        """Add ``word`` if new and return its symbol."""
        position, found = self.search(word)
        if found:
            return self._index[position]
        symbol = len(self._entries)
        self._entries.append(word)
        self._sorted.insert(position, word)
        self._index.insert(position, symbol)
        return symbol

    def find_word(self, word: str) -> int:
        """Return the symbol of ``word``, or 0 when it is unknown."""
        position, found = self.search(word)
        return self._index[position] if found else 0

    def contains(self, word: str) -> bool:
        """Return whether ``word`` is in the dictionary."""
        return self.search(word)[1]

    def clear(self) -> None:
        """Forget every word, keeping the dummy words if the dictionary had them."""
        self._entries.clear()
        self._sorted.clear()
        self._index.clear()
        if self._initialize:
            self._add_dummies()

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, symbol: int) -> str:
        return self._entries[symbol]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


@dataclass
class Node:
    """One node of an n-gram tree, with children kept sorted by symbol."""

    symbol: int = 0
    usage: int = 0
    count: int = 0
    children: list["Node"] = field(default_factory=list)

    @property
    def branch(self) -> int:
        """Number of children."""
        return len(self.children)

    def search(self, symbol: int) -> tuple[int, bool]:
        """Return the child position for ``symbol`` and whether it exists."""
        position = bisect_left(self.children, symbol, key=attrgetter("symbol"))
        found = position < len(self.children) and self.children[position].symbol == symbol
        return position, found

    def find_symbol(self, symbol: int) -> Node | None:
        """Return the child holding ``symbol``, or None."""
        position, found = self.search(symbol)
        return self.children[position] if found else None

    def find_symbol_add(self, symbol: int) -> Node:
        """Return the child holding ``symbol``, creating it if needed."""
        position, found = self.search(symbol)
        if found:
            return self.children[position]
        node = Node(symbol=symbol)
        self.children.insert(position, node)
        return node

    def add_symbol(self, symbol: int) -> Node:
        """Count one more occurrence of ``symbol`` below this node."""
        node = self.find_symbol_add(symbol)
        if node.count < MAX_COUNT:
            node.count += 1
            self.usage = (self.usage + 1) & 0xFFFFFFFF
        return node


class Model:
    """Forward and backward n-gram trees sharing one dictionary."""

    def __init__(self, order: int = DEFAULT_ORDER) -> None:
        if not 0 <= order <= 0xFF:
            raise ValueError(f"order out of range: {order}")
        self.order = order
        self.forward = Node()
        self.backward = Node()
        self.dictionary = Dictionary()
        self.context: list[Node | None] = [None] * (order + 2)

    def initialize_context(self, root: Node | None = None) -> None:
        """Reset the context, starting from ``root`` at depth zero."""
        self.context = [None] * (self.order + 2)
        self.context[0] = root

    def update_model(self, symbol: int) -> None:
        """Count ``symbol`` in every active context and move the context on."""
        for i in range(self.order + 1, 0, -1):
            parent = self.context[i - 1]
            if parent is not None:
                self.context[i] = parent.add_symbol(symbol)

    def update_context(self, symbol: int) -> None:
        """Move the context on by ``symbol`` without counting it."""
        for i in range(self.order + 1, 0, -1):
            parent = self.context[i - 1]
            if parent is not None:
                self.context[i] = parent.find_symbol(symbol)

    def learn(self, words: Sequence[str]) -> None:
        """Train both trees on a segmented sentence longer than the order."""
        if len(words) <= self.order:
            return

        self.initialize_context(self.forward)
        for word in words:
            self.update_model(self.dictionary.add_word(word))
        self.update_model(FIN_SYMBOL)

        self.initialize_context(self.backward)
        for word in reversed(words):
            self.update_model(self.dictionary.find_word(word))
        self.update_model(FIN_SYMBOL)

    def save(self, fileobj: BinaryIO) -> None:
        """Write the model in brain-file format to a binary file object."""
        fileobj.write(COOKIE)
        fileobj.write(_U8.pack(self.order))
        _save_tree(fileobj, self.forward)
        _save_tree(fileobj, self.backward)
        fileobj.write(_U32.pack(len(self.dictionary)))
        for word in self.dictionary:
            raw = word.encode(_ENCODING)
            if len(raw) > 0xFF:
                raise ValueError(f"word too long to save: {word[:20]!r}...")
            fileobj.write(_U8.pack(len(raw)))
            fileobj.write(raw)

    def load(self, fileobj: BinaryIO) -> None:
        """Replace the model with one read from a brain file; raise ValueError if bad."""
        cookie = fileobj.read(len(COOKIE))
        if cookie != COOKIE:
            raise ValueError(f"not a MegaHAL brain (bad cookie {cookie!r})")
        (order,) = _U8.unpack(_read(fileobj, _U8.size))
        forward = _load_tree(fileobj)
        backward = _load_tree(fileobj)
        (size,) = _U32.unpack(_read(fileobj, _U32.size))
        dictionary = Dictionary()
        for _ in range(size):
            (length,) = _U8.unpack(_read(fileobj, _U8.size))
            dictionary.add_word(_read(fileobj, length).decode(_ENCODING))

        self.order = order
        self.forward = forward
        self.backward = backward
        self.dictionary = dictionary
        self.context = [None] * (order + 2)


def _read(fileobj: BinaryIO, size: int) -> bytes:
    data = fileobj.read(size)
    if len(data) != size:
        raise ValueError("truncated brain file")
    return data


def _save_tree(fileobj: BinaryIO, node: Node) -> None:
    fileobj.write(_NODE.pack(node.symbol, node.usage, node.count, node.branch))
    for child in node.children:
        _save_tree(fileobj, child)


def _load_tree(fileobj: BinaryIO) -> Node:
    symbol, usage, count, branch = _NODE.unpack(_read(fileobj, _NODE.size))
    node = Node(symbol=symbol, usage=usage, count=count)
    node.children = [_load_tree(fileobj) for _ in range(branch)]
    return node


def words_of(dictionary: Iterable[str]) -> list[str]:
    """Return the words of a dictionary in symbol order."""
    return list(dictionary)