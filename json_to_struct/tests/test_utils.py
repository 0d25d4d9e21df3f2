#!/usr/bin/env python3

import pytest

from json_to_struct.utils import snake_to_pascal_case, to_go_field_name


class TestNaming:
    """Test cases for identifier conversion"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("first_name", "FirstName"),
            ("actionTemplate", "ActionTemplate"),
            ("first 3 rows", "First3Rows"),
            ("kebab-case-key", "KebabCaseKey"),
            ("ключЗначение", "КлючЗначение"),
            ("größe_kg", "GrößeKg"),
            ("", ""),
        ],
    )
    def test_snake_to_pascal_case(self, text, expected):
        assert snake_to_pascal_case(text) == expected

    @pytest.mark.parametrize(
        "json_name, expected",
        [
            ("id", "ID"),
            ("user_id", "UserID"),
            ("userId", "UserID"),
            ("apiKey", "APIKey"),
            ("homepage_url", "HomepageURL"),
            ("http_status", "HTTPStatus"),
            ("identity", "Identity"),
            ("name", "Name"),
        ],
    )
    def test_default_acronyms(self, json_name, expected):
        assert to_go_field_name(json_name) == expected

    def test_additional_acronyms(self):
        assert to_go_field_name("item_sku", ["SKU"]) == "ItemSKU"
        assert to_go_field_name("item_sku") == "ItemSku"

    @pytest.mark.parametrize("json_name, expected", [("2fa", "X2Fa"), ("$", "X"), ("@type", "Type"), ("名前", "X名前")])
    def test_invalid_identifiers_are_prefixed(self, json_name, expected):
        assert to_go_field_name(json_name) == expected

    def test_non_ascii_keys_keep_their_letters(self):
        assert to_go_field_name("ключ_id") == "КлючID"
        assert to_go_field_name("名前") != to_go_field_name("住所")


if __name__ == "__main__":
    pytest.main([__file__])
