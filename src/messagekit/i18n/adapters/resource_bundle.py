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
"""Resource-bundle message source — resolves messages from ``.properties`` files."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import Any

import structlog

from messagekit.i18n.locale import Locale
from messagekit.i18n.properties import load_properties
from messagekit.i18n.types import MessageResolvable
from messagekit.kernel.exceptions import CatalogLoadError, MessageNotFoundError

logger = structlog.get_logger("messagekit.i18n.catalog")

_PLACEHOLDER_RE = re.compile(r"\{(\d+)\}")

_SUFFIX = ".properties"


class MessageCatalog:
    """Resolves message templates by key and locale.

    File naming convention::

        {base_path}/messages.properties         (default bundle)
        {base_path}/messages_en.properties      (English)
        {base_path}/messages_ko_KR.properties   (Korean, South Korea)

    A lookup tries the locale's bundles, most specific tag first, then
    the default bundle. The catalog is read-only once constructed and may
    be shared between threads.
    """

    def __init__(
        self,
        default_messages: Mapping[str, str],
        localized_messages: Mapping[Locale | str, Mapping[str, str]] | None = None,
        *,
        use_code_as_default_message: bool = False,
        log: Any = None,
    ) -> None:
        self._default: Mapping[str, str] = MappingProxyType(dict(default_messages))
        bundles: dict[str, Mapping[str, str]] = {}
        for locale, messages in (localized_messages or {}).items():
            tag = _coerce_locale(locale).tag
            merged = dict(bundles.get(tag, {}))
            merged.update(messages)
            bundles[tag] = MappingProxyType(merged)
        self._bundles: Mapping[str, Mapping[str, str]] = MappingProxyType(bundles)
        self._use_code_as_default_message = use_code_as_default_message
        self._log = log if log is not None else logger

    @classmethod
    def from_directory(
        cls,
        base_path: str | Path,
        basenames: Iterable[str] = ("messages",),
        encoding: str = "utf-8",
        *,
        use_code_as_default_message: bool = False,
        log: Any = None,
    ) -> MessageCatalog:
        """Eagerly load every bundle of every basename under *base_path*.

        When a key is defined under several basenames, the basename listed
        first wins. Every basename must have a default (locale-less) file.
        *log* receives the load events and is kept for lookup events;
        it defaults to the ``messagekit.i18n.catalog`` structlog logger.
        """
        log = log if log is not None else logger
        base = Path(base_path)
        if not base.is_dir():
            raise CatalogLoadError(f"Message resource directory '{base}' does not exist", source=str(base))

        if isinstance(basenames, str):
            basenames = basenames.split(",")
        names = [name.strip() for name in basenames if name.strip()]
        if not names:
            raise CatalogLoadError("At least one message basename is required", source=str(base))

        default: dict[str, str] = {}
        localized: dict[str, dict[str, str]] = {}

        for name in names:
            default_path = base / f"{name}{_SUFFIX}"
            if not default_path.is_file():
                raise CatalogLoadError(
                    f"Default message resource '{default_path}' not found",
                    source=str(default_path),
                )
            _merge_missing(default, load_properties(default_path, encoding))
            log.debug("message_bundle_loaded", source=str(default_path), locale="default")

            for path, locale in _locale_files(base, name, names, log):
                bundle = localized.setdefault(locale.tag, {})
                _merge_missing(bundle, load_properties(path, encoding))
                log.debug("message_bundle_loaded", source=str(path), locale=locale.tag)

        catalog = cls(default, localized, use_code_as_default_message=use_code_as_default_message, log=log)
        log.info(
            "message_catalog_loaded",
            base_path=str(base),
            basenames=names,
            locales=list(catalog.locales),
            keys=len(default),
        )
        return catalog

    # ------------------------------------------------------------------
    # Public API (MessageSource protocol)
    # ------------------------------------------------------------------

    def resolve(
        self,
        key: str,
        args: Sequence[Any] | None = None,
        locale: Locale | str | None = None,
    ) -> str:
        """Resolve *key* for *locale*, substituting positional *args*.

        Raises :class:`MessageNotFoundError` when the key is in neither the
        locale's bundles nor the default bundle.
        """
        return self.resolve_or_default(key, args, locale, None)

    def resolve_or_default(
        self,
        key: str,
        args: Sequence[Any] | None = None,
        locale: Locale | str | None = None,
        default: str | None = None,
    ) -> str:
        """Resolve *key* for *locale*, returning *default* on a miss.

        *default* is returned verbatim, placeholders included. ``None``
        means no default was supplied.
        """
        resolved_locale = _coerce_locale(locale) if locale is not None else None
        template = self._find_template(key, resolved_locale)
        if template is not None:
            return _substitute(template, args or ())
        if default is not None:
            return default
        if self._use_code_as_default_message:
            return key
        self._log.debug("message_not_found", key=key, locale=str(resolved_locale) if resolved_locale else None)
        raise MessageNotFoundError(key, resolved_locale)

    def resolve_resolvable(
        self,
        resolvable: MessageResolvable,
        locale: Locale | str | None = None,
    ) -> str:
        """Resolve the first of *resolvable*'s codes that has a template."""
        resolved_locale = _coerce_locale(locale) if locale is not None else None
        for code in resolvable.codes:
            template = self._find_template(code, resolved_locale)
            if template is not None:
                return _substitute(template, resolvable.args)
        if resolvable.default is not None:
            return resolvable.default
        if self._use_code_as_default_message:
            return resolvable.codes[0]
        raise MessageNotFoundError(resolvable.codes[0], resolved_locale)

    def contains(self, key: str, locale: Locale | str | None = None) -> bool:
        resolved_locale = _coerce_locale(locale) if locale is not None else None
        return self._find_template(key, resolved_locale) is not None

    @property
    def locales(self) -> tuple[str, ...]:
        """Tags of the loaded locale bundles, sorted."""
        return tuple(sorted(self._bundles))

    def keys(self, locale: Locale | str | None = None) -> list[str]:
        """Keys resolvable for *locale*, sorted."""
        visible = set(self._default)
        if locale is not None:
            for tag in _coerce_locale(locale).candidate_tags():
                visible.update(self._bundles.get(tag, {}))
        return sorted(visible)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _find_template(self, key: str, locale: Locale | None) -> str | None:
        if locale is not None:
            for tag in locale.candidate_tags():
                bundle = self._bundles.get(tag)
                if bundle is not None and key in bundle:
                    return bundle[key]
        return self._default.get(key)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _coerce_locale(locale: Locale | str) -> Locale:
    return locale if isinstance(locale, Locale) else Locale.parse(locale)


def _substitute(template: str, args: Sequence[Any]) -> str:
    """Replace ``{0}``, ``{1}``, ... with *args*; out-of-range indexes stay literal."""
    if not args:
        return template

    def _replace(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index < len(args):
            return str(args[index])
        return match.group(0)

    return _PLACEHOLDER_RE.sub(_replace, template)


def _merge_missing(target: dict[str, str], entries: Mapping[str, str]) -> None:
    for key, value in entries.items():
        target.setdefault(key, value)


def _locale_files(base: Path, basename: str, basenames: Sequence[str], log: Any) -> list[tuple[Path, Locale]]:
    """Locale-suffixed files for *basename*, e.g. ``messages_en.properties``.

    Files owned by a longer sibling basename (``messages_ui`` next to
    ``messages``) are left to that basename.
    """
    prefix = f"{basename}_"
    siblings = [name for name in basenames if name != basename and name.startswith(prefix)]
    found: list[tuple[Path, Locale]] = []
    for path in sorted(base.glob(f"{prefix}*{_SUFFIX}")):
        stem = path.name[: -len(_SUFFIX)]
        if any(stem == name or stem.startswith(f"{name}_") for name in siblings):
            continue
        suffix = path.name[len(prefix) : -len(_SUFFIX)]
        try:
            locale = Locale.parse(suffix)
        except ValueError:
            log.warning("message_bundle_skipped", source=str(path), reason="unrecognised locale suffix")
            continue
        found.append((path, locale))
    return found
