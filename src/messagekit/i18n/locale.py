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
"""Locale value type, locale resolution protocol and built-in resolvers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

_TAG_RE = re.compile(r"^([A-Za-z]{2,3})(?:[-_]([A-Za-z]{2}|[0-9]{3}))?$")


@dataclass(frozen=True)
class Locale:
    """A language with an optional region, e.g. ``Locale("ko", "KR")``.

    The language is stored lower-case and the region upper-case so that
    ``Locale("EN", "us") == Locale("en", "US")``.
    """

    language: str
    region: str = ""

    def __post_init__(self) -> None:
        if not self.language:
            raise ValueError("Locale language must not be empty")
        object.__setattr__(self, "language", self.language.lower())
        object.__setattr__(self, "region", self.region.upper())

    @classmethod
    def parse(cls, tag: str) -> Locale:
        """Parse ``en``, ``en-US`` or ``en_US`` into a :class:`Locale`."""
        match = _TAG_RE.match(tag.strip())
        if match is None:
            raise ValueError(f"Invalid locale tag: '{tag}'")
        return cls(match.group(1), match.group(2) or "")

    @property
    def tag(self) -> str:
        """Underscore form used as the resource file suffix (``ko_KR``)."""
        if self.region:
            return f"{self.language}_{self.region}"
        return self.language

    def candidate_tags(self) -> list[str]:
        """Bundle tags to try for this locale, most specific first."""
        if self.region:
            return [self.tag, self.language]
        return [self.language]

    def __str__(self) -> str:
        return self.tag


ENGLISH = Locale("en")
KOREAN = Locale("ko")
KOREA = Locale("ko", "KR")
US = Locale("en", "US")
UK = Locale("en", "GB")
FRENCH = Locale("fr")
GERMAN = Locale("de")
JAPANESE = Locale("ja")
JAPAN = Locale("ja", "JP")


@runtime_checkable
class LocaleResolver(Protocol):
    """Port for determining the locale from an incoming request."""

    def resolve_locale(self, request: Any) -> Locale: ...


class AcceptHeaderLocaleResolver:
    """Parses the ``Accept-Language`` header and returns the best match.

    The resolver picks the language tag with the highest quality value.
    When no header is present or nothing in it parses, it falls back to
    *default_locale*.
    """

    def __init__(self, default_locale: Locale | str = ENGLISH) -> None:
        self._default = default_locale if isinstance(default_locale, Locale) else Locale.parse(default_locale)

    def resolve_locale(self, request: Any) -> Locale:
        header: str = getattr(request, "accept_language", "") or ""
        if not header:
            headers = getattr(request, "headers", None)
            if headers is not None:
                header = headers.get("accept-language", "")

        if not header:
            return self._default

        return _parse_accept_language(header, self._default)


class FixedLocaleResolver:
    """Always returns a pre-configured locale, ignoring the request."""

    def __init__(self, locale: Locale | str = ENGLISH) -> None:
        self._locale = locale if isinstance(locale, Locale) else Locale.parse(locale)

    def resolve_locale(self, request: Any) -> Locale:  # noqa: ARG002
        return self._locale


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _parse_accept_language(header: str, default: Locale) -> Locale:
    """Return the locale with the highest *q* value from *header*.

    Handles the standard ``Accept-Language`` format, e.g.
    ``ko-KR,ko;q=0.9,en;q=0.8``. Wildcards and malformed entries are skipped.
    """
    best_locale = default
    best_quality = 0.0

    for part in header.split(","):
        tag, _, params = part.strip().partition(";")
        tag = tag.strip()
        if not tag or tag == "*":
            continue

        quality = 1.0
        params = params.strip()
        if params:
            name, _, q_str = params.partition("=")
            if name.strip().lower() != "q":
                continue
            try:
                quality = float(q_str.strip())
            except ValueError:
                continue

        try:
            locale = Locale.parse(tag)
        except ValueError:
            continue

        if quality > best_quality:
            best_quality = quality
            best_locale = locale

    return best_locale
