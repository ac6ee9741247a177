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
"""Unified exception hierarchy for messagekit.

All library exceptions inherit from MessageKitException, enabling unified
error handling.

Categories:
- CatalogLoadError: resource files that cannot be read or parsed (fatal at startup)
- MessageNotFoundError: a lookup that cannot be resolved (recoverable by the caller)
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# Base Exception
# =============================================================================


class MessageKitException(Exception):
    """Base exception for all messagekit errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "MESSAGE_NOT_FOUND").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Catalog Exceptions
# =============================================================================


class CatalogLoadError(MessageKitException):
    """A message resource is missing, unreadable or malformed."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        line: int | None = None,
    ) -> None:
        context: dict[str, Any] = {}
        if source is not None:
            context["source"] = source
        if line is not None:
            context["line"] = line
        super().__init__(message, code="CATALOG_LOAD", context=context)
        self.source = source
        self.line = line


class MessageNotFoundError(MessageKitException, LookupError):
    """No template exists for the key and no default was supplied."""

    def __init__(self, key: str, locale: Any = None) -> None:
        if locale is None:
            message = f"No message found under code '{key}'"
        else:
            message = f"No message found under code '{key}' for locale '{locale}'"
        context: dict[str, Any] = {"key": key}
        if locale is not None:
            context["locale"] = str(locale)
        super().__init__(message, code="MESSAGE_NOT_FOUND", context=context)
        self.key = key
        self.locale = locale
