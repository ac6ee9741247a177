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
"""I18n configuration properties and explicit factories."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from messagekit.core.config import Config, config_properties
from messagekit.i18n.adapters.resource_bundle import MessageCatalog
from messagekit.i18n.locale import AcceptHeaderLocaleResolver, Locale
from messagekit.logging.port import LoggingPort


@config_properties(prefix="messagekit.messages")
class MessageProperties(BaseModel):
    """Configuration for the message catalog (messagekit.messages.*)."""

    base_path: str = "i18n"
    basename: list[str] = Field(default_factory=lambda: ["messages"], min_length=1)
    encoding: str = Field(default="utf-8", min_length=1)
    default_locale: str = "en"
    use_code_as_default_message: bool = False

    @field_validator("basename", mode="before")
    @classmethod
    def _split_basenames(cls, value: object) -> object:
        # "messages,errors" as in a properties or env value
        if isinstance(value, str):
            return [name.strip() for name in value.split(",") if name.strip()]
        return value

    @field_validator("default_locale")
    @classmethod
    def _check_locale(cls, value: str) -> str:
        return Locale.parse(value).tag


def create_message_catalog(
    config: Config,
    base_dir: str | Path | None = None,
    logging_port: LoggingPort | None = None,
) -> MessageCatalog:
    """Build the catalog described by *config*.

    A relative ``base_path`` is resolved against *base_dir* (default: the
    working directory). When *logging_port* is given it is configured from
    ``messagekit.logging`` first and the catalog logs through it. Raises
    ``CatalogLoadError`` if any resource is missing or malformed.
    """
    log = None
    if logging_port is not None:
        logging_port.configure(config)
        log = logging_port.get_logger("messagekit.i18n.catalog")
    props = config.bind(MessageProperties)
    base_path = Path(props.base_path)
    if base_dir is not None and not base_path.is_absolute():
        base_path = Path(base_dir) / base_path
    return MessageCatalog.from_directory(
        base_path,
        basenames=props.basename,
        encoding=props.encoding,
        use_code_as_default_message=props.use_code_as_default_message,
        log=log,
    )


def create_locale_resolver(config: Config) -> AcceptHeaderLocaleResolver:
    props = config.bind(MessageProperties)
    return AcceptHeaderLocaleResolver(default_locale=props.default_locale)
