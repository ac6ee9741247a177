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
"""MessageSource protocol — port for resolving internationalised messages."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from messagekit.i18n.locale import Locale


@runtime_checkable
class MessageSource(Protocol):
    """Abstract message-resolution interface.

    All message backends (resource bundles, in-memory mappings, etc.) must
    implement this protocol. ``locale=None`` means "no locale requested"
    and ``default=None`` means "no default supplied"; an empty string is a
    valid default.
    """

    def resolve(
        self,
        key: str,
        args: Sequence[Any] | None = None,
        locale: Locale | str | None = None,
    ) -> str:
        """Resolve *key* for *locale*, substituting positional *args*.

        Raises ``MessageNotFoundError`` when the key cannot be resolved.
        """
        ...

    def resolve_or_default(
        self,
        key: str,
        args: Sequence[Any] | None = None,
        locale: Locale | str | None = None,
        default: str | None = None,
    ) -> str:
        """Resolve *key* for *locale*, returning *default* verbatim on a miss."""
        ...
