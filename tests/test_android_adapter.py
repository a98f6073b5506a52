"""Tests for AndroidAdapter: file matching, parsing and locale resolution."""

import pytest
from pathlib import Path
from xml.etree import ElementTree

from android_missing_translations.frameworks.android import AndroidAdapter
from android_missing_translations.frameworks.base import StringEntry, DEFAULT_LOCALE
from android_missing_translations.core.errors import ParseError


def resources(body: str) -> bytes:
    return f'<?xml version="1.0" encoding="utf-8"?>\n<resources>{body}</resources>'.encode('utf-8')


class TestStringEntry:
    """Test cases for StringEntry.is_translatable."""

    def test_absent_attribute_is_translatable(self):
        assert StringEntry(name='a', value='A').is_translatable is True

    @pytest.mark.parametrize('raw', ['false', 'False', 'FALSE', 'fAlSe'])
    def test_false_in_any_case(self, raw):
        assert StringEntry(name='a', value='A', translatable=raw).is_translatable is False

    @pytest.mark.parametrize('raw', ['true', '', 'no', '0'])
    def test_other_values_are_translatable(self, raw):
        """Only an explicit 'false' opts out."""
        assert StringEntry(name='a', value='A', translatable=raw).is_translatable is True


class TestIsResourceFile:
    """Test cases for AndroidAdapter.is_resource_file."""

    def setup_method(self):
        self.adapter = AndroidAdapter()

    def test_default_values_file(self):
        assert self.adapter.is_resource_file(Path('res/values/strings.xml'))

    def test_locale_values_file(self):
        assert self.adapter.is_resource_file(Path('res/values-fr/strings.xml'))

    def test_extension_is_case_insensitive(self):
        assert self.adapter.is_resource_file(Path('res/values-fr/strings.XML'))

    def test_any_xml_name_matches(self):
        assert self.adapter.is_resource_file(Path('res/values/plurals_and_more.xml'))

    def test_directory_prefix_is_case_sensitive(self):
        assert not self.adapter.is_resource_file(Path('res/Values/strings.xml'))

    def test_non_xml_file(self):
        assert not self.adapter.is_resource_file(Path('res/values/strings.txt'))

    def test_other_resource_directory(self):
        assert not self.adapter.is_resource_file(Path('res/layout/activity_main.xml'))

    def test_nested_below_values(self):
        """Only the immediate parent directory counts."""
        assert not self.adapter.is_resource_file(Path('res/values/extra/strings.xml'))


class TestParseLocalizationFile:
    """Test cases for AndroidAdapter.parse_localization_file."""

    def setup_method(self):
        self.adapter = AndroidAdapter()

    def test_parses_strings_in_document_order(self):
        entries = self.adapter.parse_localization_file(resources(
            '<string name="greeting">Hello</string>'
            '<string name="farewell">Bye</string>'
        ))

        assert [e.name for e in entries] == ['greeting', 'farewell']
        assert entries[0] == StringEntry(name='greeting', value='Hello')

    def test_drops_non_translatable(self):
        entries = self.adapter.parse_localization_file(resources(
            '<string name="app_name" translatable="FALSE">App</string>'
            '<string name="title" translatable="true">Title</string>'
        ))

        assert [e.name for e in entries] == ['title']
        assert entries[0].translatable == 'true'

    def test_ignores_other_tags(self):
        entries = self.adapter.parse_localization_file(resources(
            '<string-array name="planets"><item>Mercury</item></string-array>'
            '<plurals name="songs"><item quantity="one">One song</item></plurals>'
            '<color name="red">#f00</color>'
            '<string name="title">Title</string>'
        ))

        assert [e.name for e in entries] == ['title']

    def test_only_direct_children_are_read(self):
        entries = self.adapter.parse_localization_file(resources(
            '<eat-comment><string name="nested">Nested</string></eat-comment>'
        ))

        assert entries == []

    def test_value_is_direct_character_data(self):
        """Inline markup contributes its tail text but not its own text."""
        entries = self.adapter.parse_localization_file(resources(
            '<string name="styled">Hello <b>World</b>!</string>'
        ))

        assert entries[0].value == 'Hello !'

    def test_value_is_not_stripped(self):
        entries = self.adapter.parse_localization_file(resources(
            '<string name="padded">  spaced  </string>'
        ))

        assert entries[0].value == '  spaced  '

    def test_cdata_and_unicode(self):
        entries = self.adapter.parse_localization_file(resources(
            '<string name="html"><![CDATA[<b>ça</b>]]></string>'
        ))

        assert entries[0].value == '<b>ça</b>'

    def test_empty_string_element(self):
        entries = self.adapter.parse_localization_file(resources('<string name="empty"/>'))

        assert entries == [StringEntry(name='empty', value='')]

    def test_skips_string_without_name(self):
        entries = self.adapter.parse_localization_file(resources('<string>Anonymous</string>'))

        assert entries == []

    def test_empty_resources(self):
        assert self.adapter.parse_localization_file(b'<resources/>') == []

    def test_namespaced_root_attributes(self):
        content = (
            b'<resources xmlns:tools="http://schemas.android.com/tools">'
            b'<string name="a" tools:ignore="MissingTranslation">A</string>'
            b'</resources>'
        )

        assert [e.name for e in self.adapter.parse_localization_file(content)] == ['a']

    def test_namespaced_string_tags(self):
        content = (
            b'<resources xmlns:a="urn:a">'
            b'<a:string name="n">v</a:string>'
            b'<a:string-array name="arr"><item>x</item></a:string-array>'
            b'</resources>'
        )

        assert self.adapter.parse_localization_file(content) == [StringEntry(name='n', value='v')]

    def test_malformed_xml_raises_parse_error(self):
        with pytest.raises(ParseError) as exc_info:
            self.adapter.parse_localization_file(b'<resources><string name="a">', 'res/values/strings.xml')

        error = exc_info.value
        assert error.path == Path('res/values/strings.xml')
        assert isinstance(error.cause, ElementTree.ParseError)
        assert 'res/values/strings.xml' in str(error)

    def test_empty_content_raises_parse_error(self):
        with pytest.raises(ParseError):
            self.adapter.parse_localization_file(b'', 'res/values/strings.xml')

    def test_wrong_root_raises_parse_error(self):
        with pytest.raises(ParseError) as exc_info:
            self.adapter.parse_localization_file(b'<manifest/>', 'res/values/strings.xml')

        assert '<resources>' in str(exc_info.value)
        assert '<manifest>' in str(exc_info.value)


class TestExtractLanguageCode:
    """Test cases for locale resolution from directory names."""

    def setup_method(self):
        self.adapter = AndroidAdapter()

    def test_values_is_default(self):
        assert self.adapter.extract_language_code('res/values/strings.xml') == DEFAULT_LOCALE

    def test_values_any_case_is_default(self):
        assert self.adapter.extract_language_code('res/VALUES/strings.xml') == DEFAULT_LOCALE
        assert self.adapter.extract_language_code('res/Values/strings.xml') == DEFAULT_LOCALE

    def test_language_suffix(self):
        assert self.adapter.extract_language_code('res/values-fr/strings.xml') == 'fr'

    def test_splits_on_first_dash_only(self):
        assert self.adapter.extract_language_code('res/values-zh-rCN/strings.xml') == 'zh-rCN'

    def test_bcp47_suffix_kept_verbatim(self):
        assert self.adapter.extract_language_code('res/values-b+sr+Latn/strings.xml') == 'b+sr+Latn'

    def test_trailing_dash_falls_back_to_default(self):
        assert self.adapter.extract_language_code('res/values-/strings.xml') == DEFAULT_LOCALE

    def test_no_dash_falls_back_to_default(self):
        assert self.adapter.extract_language_code('res/valuesfr/strings.xml') == DEFAULT_LOCALE

    def test_accepts_path_objects(self):
        assert self.adapter.extract_language_code(Path('res') / 'values-de' / 'strings.xml') == 'de'
