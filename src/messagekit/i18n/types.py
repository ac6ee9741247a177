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
"""I18n value types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class MessageResolvable:
    """A message described by candidate codes, arguments and a default.

    Codes are tried in order, so the most specific one goes first, e.g.
    ``("required.item.name", "required")``.
    """

    codes: tuple[str, ...]
    args: tuple[Any, ...] = ()
    default: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.codes, str):
            object.__setattr__(self, "codes", (self.codes,))
        else:
            object.__setattr__(self, "codes", tuple(self.codes))
        object.__setattr__(self, "args", tuple(self.args))
        if not self.codes and self.default is None:
            raise ValueError("MessageResolvable needs at least one code or a default")
