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
"""messagekit I18n — locale-aware message resolution from resource bundles.

Typical startup::

    from messagekit.core.config import Config
    from messagekit.i18n import KOREA, create_message_catalog

    catalog = create_message_catalog(Config.from_file("messagekit.yaml"))
    catalog.resolve("hello.name", ["Spring"], KOREA)
"""

from messagekit.i18n.adapters.resource_bundle import MessageCatalog
from messagekit.i18n.configuration import (
    MessageProperties,
    create_locale_resolver,
    create_message_catalog,
)
from messagekit.i18n.locale import (
    ENGLISH,
    FRENCH,
    GERMAN,
    JAPAN,
    JAPANESE,
    KOREA,
    KOREAN,
    UK,
    US,
    AcceptHeaderLocaleResolver,
    FixedLocaleResolver,
    Locale,
    LocaleResolver,
)
from messagekit.i18n.ports.outbound import MessageSource
from messagekit.i18n.properties import load_properties, parse_properties
from messagekit.i18n.types import MessageResolvable

__all__ = [
    "ENGLISH",
    "FRENCH",
    "GERMAN",
    "JAPAN",
    "JAPANESE",
    "KOREA",
    "KOREAN",
    "UK",
    "US",
    "AcceptHeaderLocaleResolver",
    "FixedLocaleResolver",
    "Locale",
    "LocaleResolver",
    "MessageCatalog",
    "MessageProperties",
    "MessageResolvable",
    "MessageSource",
    "create_locale_resolver",
    "create_message_catalog",
    "load_properties",
    "parse_properties",
]
