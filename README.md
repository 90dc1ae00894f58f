# strtrimkit

Remove a chosen set of characters from the start and end of a string.

## Installation

```
pip install strtrimkit
```

## Usage

```python
from strtrimkit.trim import trim, trailing_span

trim("  hello  ")              # "hello"  (spaces are stripped by default)
trim("  hello  ", None)        # "hello"
trim("xxhixyx", "xy")          # "hi"
trim("aaaa", "a")              # ""       (everything trimmed)
trim("  hello  ", "")          # "  hello  "  (an empty set removes nothing)
trim(None, " ")                # None     (no input, no result)

trailing_span("hello!!?", "!?")  # 3
```

`trim(src, trim_chars=None)` treats `trim_chars` as a set of characters, not
as a prefix or a suffix. When `trim_chars` is `None`, a single space is used.
When `src` is `None`, `None` is returned.

`trailing_span(text, chars)` counts how many characters at the end of `text`
all belong to `chars`. If every character belongs to `chars`, the whole length
of `text` is returned; an empty `chars` gives `0`.

## What it does not do

strtrimkit is a library only: it installs no command-line program.

## Running the tests

```
pip install "strtrimkit[test]"
pytest
```