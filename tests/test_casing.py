"""Unit tests for the key-casing helpers in timekit/_casing.py.

The request pipeline decamelizes outgoing body keys and, when configured,
camelizes incoming ones. Both transforms must rewrite keys at every depth
while leaving values untouched.
"""

import pytest

from timekit._casing import camelize, camelize_keys, decamelize, decamelize_keys


class TestDecamelize:
    """Tests for single-key camelCase -> snake_case conversion."""

    @pytest.mark.parametrize(
        "key, expected",
        [
            ("firstName", "first_name"),
            ("calendarId", "calendar_id"),
            ("ignoreAllDayEvents", "ignore_all_day_events"),
            ("userID", "user_id"),
            ("HTMLParser", "html_parser"),
            ("what", "what"),
            ("already_snake", "already_snake"),
        ],
    )
    def test_decamelize(self, key: str, expected: str) -> None:
        assert decamelize(key) == expected

    def test_all_caps_untouched(self) -> None:
        """Acronym-only keys are left alone."""
        assert decamelize("ID") == "ID"


class TestCamelize:
    """Tests for single-key snake_case -> camelCase conversion."""

    @pytest.mark.parametrize(
        "key, expected",
        [
            ("foo_bar", "fooBar"),
            ("api_token", "apiToken"),
            ("ignore_all_day_events", "ignoreAllDayEvents"),
            ("email", "email"),
            ("alreadyCamel", "alreadyCamel"),
            ("foo-bar", "fooBar"),
            ("foo bar", "fooBar"),
            ("foo--bar_baz", "fooBarBaz"),
            ("foo_", "foo"),
            ("Foo-Bar", "fooBar"),
        ],
    )
    def test_camelize(self, key: str, expected: str) -> None:
        assert camelize(key) == expected

    def test_leading_underscore_preserved(self) -> None:
        assert camelize("_links") == "_links"
        assert camelize("_next_page") == "_nextPage"


class TestDecamelizeKeys:
    """Tests for the recursive outgoing-body transform."""

    def test_nested_mapping(self) -> None:
        """Keys are rewritten at every nesting depth; values are untouched."""
        body = {"firstName": "Jo", "lastModified": {"atTime": 5}}

        assert decamelize_keys(body) == {"first_name": "Jo", "last_modified": {"at_time": 5}}

    def test_lists_are_traversed(self) -> None:
        body = {"suggestions": [{"startTime": "a"}, {"startTime": "b"}]}

        assert decamelize_keys(body) == {"suggestions": [{"start_time": "a"}, {"start_time": "b"}]}

    def test_string_values_not_rewritten(self) -> None:
        """Only keys change, never values that look like camelCase."""
        assert decamelize_keys({"what": "flyingCar"}) == {"what": "flyingCar"}

    def test_top_level_list(self) -> None:
        assert decamelize_keys([{"calendarId": 1}, 2]) == [{"calendar_id": 1}, 2]

    def test_scalars_pass_through(self) -> None:
        assert decamelize_keys(42) == 42
        assert decamelize_keys(None) is None

    def test_input_not_mutated(self) -> None:
        body = {"outer": {"innerKey": 1}}
        decamelize_keys(body)

        assert body == {"outer": {"innerKey": 1}}


class TestCamelizeKeys:
    """Tests for the recursive incoming-body transform."""

    def test_nested_mapping(self) -> None:
        body = {"api_token": "T", "user": {"first_name": "Marty", "time_zone": "UTC"}}

        assert camelize_keys(body) == {
            "apiToken": "T",
            "user": {"firstName": "Marty", "timeZone": "UTC"},
        }

    def test_list_of_mappings(self) -> None:
        assert camelize_keys([{"foo_bar": 1}]) == [{"fooBar": 1}]
