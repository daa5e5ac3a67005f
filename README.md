# hxlib

A small, dependency-free library of building blocks for a chat client.
It runs on POSIX systems (`hxlib.fsutil` uses `fcntl`).

## Modules

- `hxlib.haval` – the HAVAL hash function with a 128, 160, 192, 224 or
  256 bit fingerprint and 3, 4 or 5 passes. `Haval(fptlen=128, passes=3)`
  works like the `hashlib` objects: `update`, `digest`, `hexdigest`,
  `copy` and `digest_size`. `digest` leaves the hasher usable.
  `haval_buffer(data, fptlen, passes)` hashes bytes in one call, and
  `haval_file(fileobj, maxlen, fptlen, passes)` hashes a binary file
  object, reading at most `maxlen` bytes (0 reads to the end).
  Unsupported lengths or pass counts raise `ValueError`.
- `hxlib.haval_rounds` – the block function `hash_block(fingerprint,
  block, passes)` on 8 and 32 words, and `tailor(fingerprint, fptlen)`,
  the final folding step that `Haval` is built on.
- `hxlib.history` – an input line history. `History` has `add`,
  `previous`, `next`, `current`, `where`, `set_pos`, `get` (by logical
  number counted from `base`, which starts at 1), `replace`, `remove`,
  `entries`, `total_bytes`, `clear`, and `stifle` / `unstifle` /
  `is_stifled` to limit how many lines are kept. `get_state` and
  `set_state` save and restore the list and cursor as a `HistoryState`;
  each line is a `HistoryEntry` with `line` and `data`.
- `hxlib.fsutil` – `basename`, `set_blocking`, `set_close_on_exec` and
  `lock_write` (a non-blocking exclusive lock on the whole file, raising
  `OSError` when another process holds it).
- `hxlib.megahal_model` – the learning side of a MegaHAL style Markov
  model on words:
  - `make_words(text)` splits text into words and the separators between
    them, ending the list with `.`, `!` or `?`; `boundary` and `wordcmp`
    are the helpers it uses.
  - `Dictionary` numbers words in the order they are added (symbols 0 and
    1 are the reserved `<ERROR>` and `<FIN>` words); `find_word` returns
    0 for unknown words.
  - `Node` is a node of an n-gram tree with counts and sorted children.
  - `Model(order=5)` holds a forward and a backward tree over one
    dictionary. `learn(words)` trains on a segmented sentence longer than
    the order; `save(fileobj)` and `load(fileobj)` write and read the
    binary brain format (`load` raises `ValueError` on a bad or truncated
    file).

## Installing

```
pip install .
```

## Examples

Hashing:

```python
from hxlib.haval import Haval, haval_buffer

h = Haval(256, 5)
h.update(b"hello ")
h.update(b"world")
print(h.hexdigest())

print(haval_buffer(b"hello world", 128, 3).hex())
```

History:

```python
from hxlib.history import History

history = History()
history.add("first line")
history.add("second line")
history.using_history()
print(history.previous().line)   # second line
print(history.previous().line)   # first line
```

Word model:

```python
import io
from hxlib.megahal_model import Model, make_words

words = make_words("THE CAT SAT ON THE MAT")
model = Model()
model.learn(words)

brain = io.BytesIO()
model.save(brain)
brain.seek(0)
restored = Model()
restored.load(brain)
```

## What it does not do

- There is no compressed stream support; data is hashed, stored and
  recorded as given.
- `hxlib.megahal_model` only learns and stores a model. It does not
  pick keywords, generate or score replies, read word lists or training
  files, or talk in a chat; there is no bot built on it here.
- There is no command-line program and no network client.

## Running the tests

```
pip install .[test]
pytest
```