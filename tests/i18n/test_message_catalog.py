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
"""Tests for MessageCatalog — lookup, fallback, substitution and loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from messagekit.i18n.adapters.resource_bundle import MessageCatalog
from messagekit.i18n.locale import ENGLISH, KOREA, US, Locale
from messagekit.i18n.ports.outbound import MessageSource
from messagekit.i18n.types import MessageResolvable
from messagekit.kernel.exceptions import CatalogLoadError, MessageKitException, MessageNotFoundError

RESOURCES = Path(__file__).parent / "resources"


@pytest.fixture
def catalog() -> MessageCatalog:
    return MessageCatalog.from_directory(RESOURCES)


class TestMessageCatalogConformance:
    def test_implements_message_source(self, catalog: MessageCatalog):
        assert isinstance(catalog, MessageSource)


class TestDefaultBundle:
    def test_hello_message(self, catalog: MessageCatalog):
        assert catalog.resolve("hello", None, None) == "안녕"

    def test_not_found_message_code(self, catalog: MessageCatalog):
        with pytest.raises(MessageNotFoundError) as exc_info:
            catalog.resolve("no_code", None, None)
        assert exc_info.value.key == "no_code"
        assert exc_info.value.locale is None
        assert exc_info.value.code == "MESSAGE_NOT_FOUND"

    def test_not_found_is_lookup_error(self, catalog: MessageCatalog):
        with pytest.raises(LookupError):
            catalog.resolve("no_code")

    def test_not_found_names_locale(self, catalog: MessageCatalog):
        with pytest.raises(MessageNotFoundError, match="no_code") as exc_info:
            catalog.resolve("no_code", locale=ENGLISH)
        assert exc_info.value.locale == ENGLISH
        assert exc_info.value.context == {"key": "no_code", "locale": "en"}

    def test_default_message(self, catalog: MessageCatalog):
        assert catalog.resolve_or_default("no_code", None, None, "기본 메시지") == "기본 메시지"

    def test_empty_default_is_a_default(self, catalog: MessageCatalog):
        assert catalog.resolve_or_default("no_code", default="") == ""

    def test_none_default_still_raises(self, catalog: MessageCatalog):
        with pytest.raises(MessageNotFoundError):
            catalog.resolve_or_default("no_code", default=None)

    def test_default_is_not_substituted(self, catalog: MessageCatalog):
        assert catalog.resolve_or_default("no_code", ["x"], None, "value {0}") == "value {0}"

    def test_existing_key_ignores_default(self, catalog: MessageCatalog):
        assert catalog.resolve_or_default("hello", default="fallback") == "안녕"


class TestArguments:
    def test_argument_message(self, catalog: MessageCatalog):
        assert catalog.resolve("hello.name", ["Spring"], None) == "안녕 Spring"

    def test_arguments_are_converted_to_text(self):
        catalog = MessageCatalog({"range": "{0} ~ {1}"})
        assert catalog.resolve("range", (10, 2.5)) == "10 ~ 2.5"

    def test_repeated_and_reordered_placeholders(self):
        catalog = MessageCatalog({"swap": "{1}-{0}-{1}"})
        assert catalog.resolve("swap", ["a", "b"]) == "b-a-b"

    def test_out_of_range_placeholder_stays_literal(self):
        catalog = MessageCatalog({"greet": "hi {0} and {5}"})
        assert catalog.resolve("greet", ["Kim"]) == "hi Kim and {5}"

    def test_no_arguments_leaves_placeholders(self, catalog: MessageCatalog):
        assert catalog.resolve("hello.name") == "안녕 {0}"

    def test_argument_text_is_not_rescanned(self):
        catalog = MessageCatalog({"echo": "{0} {1}"})
        assert catalog.resolve("echo", ["{1}", "x"]) == "{1} x"


class TestLocaleFallback:
    def test_default_lang(self, catalog: MessageCatalog):
        assert catalog.resolve("hello", None, None) == "안녕"
        assert catalog.resolve("hello", None, KOREA) == "안녕"

    def test_en_lang(self, catalog: MessageCatalog):
        assert catalog.resolve("hello", None, ENGLISH) == "hello"

    def test_en_argument_message(self, catalog: MessageCatalog):
        assert catalog.resolve("hello.name", ["Spring"], ENGLISH) == "hello Spring"

    def test_region_falls_back_to_language(self, catalog: MessageCatalog):
        assert catalog.resolve("hello", locale=US) == "hello"

    def test_locale_given_as_string(self, catalog: MessageCatalog):
        assert catalog.resolve("hello", locale="en-US") == "hello"

    def test_exact_region_wins_over_language(self):
        catalog = MessageCatalog(
            {"color": "색"},
            {"en": {"color": "colour"}, "en_US": {"color": "color"}},
        )
        assert catalog.resolve("color", locale=US) == "color"
        assert catalog.resolve("color", locale=Locale("en", "GB")) == "colour"

    def test_locale_bundle_missing_key_uses_default(self):
        catalog = MessageCatalog({"hello": "안녕", "bye": "잘가"}, {ENGLISH: {"hello": "hello"}})
        assert catalog.resolve("bye", locale=ENGLISH) == "잘가"

    def test_default_only_keys_resolve_for_any_locale(self):
        catalog = MessageCatalog({"only": "default"}, {"en": {"other": "x"}})
        for locale in (None, ENGLISH, KOREA, Locale("fr"), Locale("zz", "ZZ")):
            assert catalog.resolve("only", locale=locale) == "default"


class TestResolvable:
    @pytest.fixture
    def errors(self) -> MessageCatalog:
        return MessageCatalog.from_directory(RESOURCES, basenames=("errors",))

    def test_first_matching_code_wins(self, errors: MessageCatalog):
        resolvable = MessageResolvable(("required.item.name", "required"))
        assert errors.resolve_resolvable(resolvable) == "상품 이름은 필수입니다"

    def test_falls_through_to_later_code(self, errors: MessageCatalog):
        resolvable = MessageResolvable(("required.item.name", "required"))
        assert errors.resolve_resolvable(resolvable, ENGLISH) == "상품 이름은 필수입니다"
        resolvable = MessageResolvable(("required.item.price", "required"))
        assert errors.resolve_resolvable(resolvable, ENGLISH) == "This field is required"

    def test_arguments(self):
        catalog = MessageCatalog({"range": "{0} ~ {1}"})
        assert catalog.resolve_resolvable(MessageResolvable(("range",), (1, 9))) == "1 ~ 9"

    def test_single_code_string(self):
        catalog = MessageCatalog({"a": "A"})
        assert catalog.resolve_resolvable(MessageResolvable("a")) == "A"

    def test_default(self):
        catalog = MessageCatalog({})
        assert catalog.resolve_resolvable(MessageResolvable(("x",), default="fallback {0}")) == "fallback {0}"

    def test_missing_raises(self):
        catalog = MessageCatalog({})
        with pytest.raises(MessageNotFoundError) as exc_info:
            catalog.resolve_resolvable(MessageResolvable(("x", "y")))
        assert exc_info.value.key == "x"

    def test_requires_code_or_default(self):
        with pytest.raises(ValueError):
            MessageResolvable(())


class TestUseCodeAsDefaultMessage:
    def test_returns_key(self):
        catalog = MessageCatalog({}, use_code_as_default_message=True)
        assert catalog.resolve("no_code") == "no_code"

    def test_explicit_default_still_wins(self):
        catalog = MessageCatalog({}, use_code_as_default_message=True)
        assert catalog.resolve_or_default("no_code", default="d") == "d"


class TestIntrospection:
    def test_locales(self, catalog: MessageCatalog):
        assert catalog.locales == ("en",)

    def test_contains(self, catalog: MessageCatalog):
        assert catalog.contains("hello")
        assert catalog.contains("hello", KOREA)
        assert not catalog.contains("no_code", ENGLISH)

    def test_keys(self):
        catalog = MessageCatalog({"a": "1"}, {"en": {"b": "2"}, "fr": {"c": "3"}})
        assert catalog.keys() == ["a"]
        assert catalog.keys(US) == ["a", "b"]

    def test_catalog_is_not_affected_by_source_mutation(self):
        source = {"a": "1"}
        catalog = MessageCatalog(source)
        source["a"] = "changed"
        assert catalog.resolve("a") == "1"


class TestFromDirectory:
    def test_multiple_basenames_first_wins(self):
        catalog = MessageCatalog.from_directory(RESOURCES, basenames=("messages", "errors"))
        assert catalog.resolve("hello") == "안녕"
        assert catalog.resolve("range", [1, 10]) == "1 ~ 10 범위를 허용합니다"
        assert catalog.resolve("range", [1, 10], ENGLISH) == "Allowed range is 1 to 10"

    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(CatalogLoadError):
            MessageCatalog.from_directory(tmp_path / "nope")

    def test_missing_default_file(self, tmp_path: Path):
        (tmp_path / "messages_en.properties").write_text("hello=hello\n", encoding="utf-8")
        with pytest.raises(CatalogLoadError, match="messages.properties"):
            MessageCatalog.from_directory(tmp_path)

    def test_malformed_default_file(self, tmp_path: Path):
        (tmp_path / "messages.properties").write_text("hello=안녕\nbroken line\n", encoding="utf-8")
        with pytest.raises(CatalogLoadError) as exc_info:
            MessageCatalog.from_directory(tmp_path)
        assert exc_info.value.line == 2
        assert isinstance(exc_info.value, MessageKitException)

    def test_malformed_locale_file(self, tmp_path: Path):
        (tmp_path / "messages.properties").write_text("hello=안녕\n", encoding="utf-8")
        (tmp_path / "messages_en.properties").write_text("=hello\n", encoding="utf-8")
        with pytest.raises(CatalogLoadError, match="empty key"):
            MessageCatalog.from_directory(tmp_path)

    def test_undecodable_file(self, tmp_path: Path):
        (tmp_path / "messages.properties").write_bytes(b"hello=\xff\xfe\n")
        with pytest.raises(CatalogLoadError):
            MessageCatalog.from_directory(tmp_path)

    def test_region_file(self, tmp_path: Path):
        (tmp_path / "messages.properties").write_text("hello=안녕\n", encoding="utf-8")
        (tmp_path / "messages_en_US.properties").write_text("hello=howdy\n", encoding="utf-8")
        catalog = MessageCatalog.from_directory(tmp_path)
        assert catalog.locales == ("en_US",)
        assert catalog.resolve("hello", locale=US) == "howdy"
        assert catalog.resolve("hello", locale=ENGLISH) == "안녕"

    def test_unrecognised_suffix_is_skipped(self, tmp_path: Path):
        (tmp_path / "messages.properties").write_text("hello=안녕\n", encoding="utf-8")
        (tmp_path / "messages_not-a-locale.properties").write_text("hello=x\n", encoding="utf-8")
        catalog = MessageCatalog.from_directory(tmp_path)
        assert catalog.locales == ()

    def test_sibling_file_is_not_a_locale(self, tmp_path: Path):
        (tmp_path / "messages.properties").write_text("hello=안녕\n", encoding="utf-8")
        (tmp_path / "messages_errors.properties").write_text("hello=oops\n", encoding="utf-8")
        catalog = MessageCatalog.from_directory(tmp_path)
        assert catalog.locales == ()
        assert catalog.resolve("hello", locale=Locale("err")) == "안녕"

    def test_sibling_basename_files_load_once(self, tmp_path: Path):
        (tmp_path / "messages.properties").write_text("hello=안녕\n", encoding="utf-8")
        (tmp_path / "messages_ui.properties").write_text("button.ok=확인\n", encoding="utf-8")
        (tmp_path / "messages_ui_en.properties").write_text("button.ok=OK\n", encoding="utf-8")
        catalog = MessageCatalog.from_directory(tmp_path, basenames=("messages", "messages_ui"))
        assert catalog.locales == ("en",)
        assert catalog.resolve("button.ok") == "확인"
        assert catalog.resolve("button.ok", locale=ENGLISH) == "OK"
        assert catalog.keys(ENGLISH) == ["button.ok", "hello"]

    def test_no_basenames(self):
        with pytest.raises(CatalogLoadError):
            MessageCatalog.from_directory(RESOURCES, basenames=())
