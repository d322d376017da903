"""Test URL template rendering."""

import pytest

from ytpartner.exceptions import TemplateResolutionError
from ytpartner.templating import placeholders, render, to_text


class TestPlaceholders:
    """Test placeholders function."""

    def test_in_order_of_appearance(self):
        """Test placeholder names are returned in template order."""
        template = 'https://host/{a}/items/{b}/{+c}'
        assert placeholders(template) == ['a', 'b', 'c']

    def test_no_placeholders(self):
        """Test a template without placeholders."""
        assert placeholders('https://host/assetLabels') == []


class TestRender:
    """Test render function."""

    def test_single_placeholder(self):
        """Test substituting one value."""
        url = render('https://host/assets/{assetId}', {'assetId': 'A123'})
        assert url == 'https://host/assets/A123'

    def test_multiple_placeholders(self):
        """Test substituting several values."""
        url = render('https://host/{a}/x/{b}', {'a': '1', 'b': '2'})
        assert url == 'https://host/1/x/2'

    def test_values_percent_encoded(self):
        """Test that reserved characters are percent-encoded."""
        url = render(
            'https://host/whitelists/{id}', {'id': 'a b/c?d&e#f{g}'}
        )
        assert url == 'https://host/whitelists/a%20b%2Fc%3Fd%26e%23f%7Bg%7D'
        assert '{' not in url and '}' not in url

    def test_reserved_expansion_keeps_slashes(self):
        """Test that {+name} leaves slashes unescaped."""
        url = render('https://host/{+path}', {'path': 'a/b c'})
        assert url == 'https://host/a/b%20c'

    def test_non_string_values(self):
        """Test numbers and booleans are rendered in wire form."""
        assert render('https://host/{n}', {'n': 42}) == 'https://host/42'
        assert render('https://host/{b}', {'b': True}) == 'https://host/true'

    def test_extra_values_ignored(self):
        """Test that values without a placeholder are ignored."""
        assert render('https://host/{a}', {'a': '1', 'z': '9'}) == 'https://host/1'

    def test_missing_value(self):
        """Test that a placeholder without a value is an error."""
        with pytest.raises(TemplateResolutionError) as exc_info:
            render('https://host/assets/{assetId}', {})

        assert exc_info.value.placeholder == 'assetId'
        assert exc_info.value.template == 'https://host/assets/{assetId}'

    def test_none_value_is_missing(self):
        """Test that a None value cannot fill a placeholder."""
        with pytest.raises(TemplateResolutionError):
            render('https://host/assets/{assetId}', {'assetId': None})


class TestToText:
    """Test to_text function."""

    def test_booleans_lowercase(self):
        """Test booleans use JSON spelling."""
        assert to_text(True) == 'true'
        assert to_text(False) == 'false'

    def test_other_values(self):
        """Test other values use str()."""
        assert to_text(7) == '7'
        assert to_text('x') == 'x'
