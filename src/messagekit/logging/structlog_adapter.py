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
"""StructlogAdapter — LoggingPort implementation using structlog."""

from __future__ import annotations

import logging
import sys
from typing import Any, Literal

import structlog
from pydantic import BaseModel, Field, field_validator

from messagekit.core.config import Config, config_properties


@config_properties(prefix="messagekit.logging")
class LoggingProperties(BaseModel):
    """Logging settings (messagekit.logging.*).

    ``level.root`` sets the root level; any other ``level`` entry names a
    logger, e.g. ``messagekit.i18n.catalog: DEBUG`` to see every loaded bundle.
    """

    format: Literal["console", "json"] = "console"
    level: dict[str, str] = Field(default_factory=lambda: {"root": "INFO"})

    @field_validator("format", mode="before")
    @classmethod
    def _lower_format(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value

    @field_validator("level")
    @classmethod
    def _check_levels(cls, value: dict[str, str]) -> dict[str, str]:
        levels = {name: str(level).upper() for name, level in value.items()}
        for name, level in levels.items():
            if not isinstance(logging.getLevelName(level), int):
                raise ValueError(f"Unknown log level '{level}' for '{name}'")
        return levels

    @property
    def root_level(self) -> str:
        return self.level.get("root", "INFO")

    @property
    def logger_levels(self) -> dict[str, str]:
        return {name: level for name, level in self.level.items() if name != "root"}


class StructlogAdapter:
    """Routes catalog events through structlog onto stdout.

    Console output is meant for development; ``json`` renders one object per
    event with non-ASCII message keys and values left readable.
    """

    def __init__(self) -> None:
        self.properties = LoggingProperties()

    def configure(self, config: Config) -> None:
        self.properties = config.bind(LoggingProperties)

        renderer: structlog.types.Processor
        if self.properties.format == "json":
            renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
        else:
            renderer = structlog.dev.ConsoleRenderer()

        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.UnicodeDecoder(),
                renderer,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )
        logging.basicConfig(
            format="%(message)s",
            stream=sys.stdout,
            level=getattr(logging, self.properties.root_level),
            force=True,
        )
        for name, level in self.properties.logger_levels.items():
            logging.getLogger(name).setLevel(getattr(logging, level))

    def get_logger(self, name: str) -> Any:
        return structlog.get_logger(name)
