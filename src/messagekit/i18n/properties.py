# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""``.properties`` resource parser.

Supported syntax::

    # comment
    ! also a comment
    hello=안녕
    hello.name = 안녕 {0}
    greeting: hi
    long.text=first part \\
              second part
    escaped=tab\\there \\u00e9

Anything else that is not blank is rejected with :class:`CatalogLoadError`.
"""

from __future__ import annotations

import re
from pathlib import Path

from messagekit.kernel.exceptions import CatalogLoadError

_SEPARATORS = "=:"

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

_ESCAPES = {
    "t": "\t",
    "n": "\n",
    "r": "\r",
    "f": "\f",
    "\\": "\\",
    "=": "=",
    ":": ":",
    "#": "#",
    "!": "!",
    " ": " ",
}


def load_properties(path: str | Path, encoding: str = "utf-8") -> dict[str, str]:
    """Read and parse the properties file at *path*."""
    path = Path(path)
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise CatalogLoadError(f"Cannot read message resource '{path}': {exc}", source=str(path)) from exc
    return parse_properties(text, source=str(path))


def parse_properties(text: str, source: str = "<string>") -> dict[str, str]:
    """Parse properties *text* into a key → value dict. Later keys win."""
    entries: dict[str, str] = {}
    for line_no, logical in _logical_lines(_LINE_BREAK_RE.split(text)):
        key, value = _split_entry(logical, source, line_no)
        entries[key] = value
    return entries


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _logical_lines(lines: list[str]) -> list[tuple[int, str]]:
    """Join continuation lines, drop blanks and comments.

    Each result carries the 1-based number of the line it started on.
    """
    result: list[tuple[int, str]] = []
    buffer: list[str] = []
    start = 0

    for index, raw in enumerate(lines, start=1):
        line = raw.lstrip()
        if not buffer:
            if not line or line[0] in "#!":
                continue
            start = index

        if _ends_with_continuation(line):
            buffer.append(line[:-1])
            continue

        buffer.append(line)
        result.append((start, "".join(buffer)))
        buffer = []

    if buffer:
        result.append((start, "".join(buffer)))
    return result


def _ends_with_continuation(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split_entry(line: str, source: str, line_no: int) -> tuple[str, str]:
    index = 0
    while index < len(line):
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS:
            break
        index += 1
    else:
        raise CatalogLoadError(
            f"Malformed entry in '{source}' at line {line_no}: expected 'key=value'",
            source=source,
            line=line_no,
        )

    key = _unescape(_trim(line[:index]), source, line_no)
    if not key:
        raise CatalogLoadError(
            f"Malformed entry in '{source}' at line {line_no}: empty key",
            source=source,
            line=line_no,
        )
    value = _unescape(_trim(line[index + 1 :]), source, line_no)
    return key, value


def _trim(text: str) -> str:
    """Strip surrounding whitespace, keeping a trailing escaped space such as ``hello\\ ``."""
    text = text.lstrip()
    escaped_end = 0
    index = 0
    while index < len(text):
        if text[index] == "\\":
            index += 2
            escaped_end = min(index, len(text))
        else:
            index += 1
    return text[:escaped_end] + text[escaped_end:].rstrip()


def _unescape(text: str, source: str, line_no: int) -> str:
    if "\\" not in text:
        return text

    out: list[str] = []
    index = 0
    while index < len(text):
        char = text[index]
        if char != "\\":
            out.append(char)
            index += 1
            continue

        escape = text[index + 1 : index + 2]
        if escape == "u":
            digits = text[index + 2 : index + 6]
            try:
                if len(digits) != 4:
                    raise ValueError(digits)
                out.append(chr(int(digits, 16)))
            except ValueError:
                raise CatalogLoadError(
                    f"Malformed \\u escape in '{source}' at line {line_no}",
                    source=source,
                    line=line_no,
                ) from None
            index += 6
        elif escape in _ESCAPES:
            out.append(_ESCAPES[escape])
            index += 2
        else:
            raise CatalogLoadError(
                f"Invalid escape '\\{escape}' in '{source}' at line {line_no}",
                source=source,
                line=line_no,
            )
    return "".join(out)
