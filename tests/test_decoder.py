"""End-to-end decoding tests."""

import io
from datetime import UTC, datetime

import pytest

from typed_form import (
    InvalidBoolean,
    InvalidDate,
    InvalidFieldName,
    InvalidNumber,
    ParseOptions,
    decode_entries,
    parse_typed_form,
    strip_empty,
)

STRICT = ParseOptions(strict=True)
IGNORE_EMPTY = ParseOptions(ignore_empty=True)


# ---------------------------------------------------------------------------
# Casting and paths
# ---------------------------------------------------------------------------

def test_number_field():
    out = decode_entries([("number::x", "22")])
    assert out == {"x": 22}
    assert isinstance(out["x"], int)

def test_plain_name_is_string():
    assert decode_entries([("name", "Joe")]) == {"name": "Joe"}

def test_nested_path():
    assert decode_entries([("number::user.age", "30")]) == {"user": {"age": 30}}

def test_mixed_record():
    out = decode_entries([
        ("string::user.name", "Joe"),
        ("number::user.age", "36"),
        ("boolean::user.active", "yes"),
        ("date::user.joined", "2024-01-15"),
        ('json::user.meta', '{"role": "admin"}'),
    ])
    assert out == {
        "user": {
            "name": "Joe",
            "age": 36,
            "active": True,
            "joined": datetime(2024, 1, 15, tzinfo=UTC),
            "meta": {"role": "admin"},
        }
    }

def test_unknown_type_token_is_string():
    assert decode_entries([("color::fav", "red")]) == {"fav": "red"}

def test_bad_type_token_uses_full_name():
    assert decode_entries([("9x::a", "v")]) == {"9x::a": "v"}

def test_non_string_values_stringified():
    out = decode_entries([("number::n", 5), ("boolean::b", True), ("string::s", None)])
    assert out == {"n": 5, "b": True, "s": ""}


# ---------------------------------------------------------------------------
# Arrays and repeated fields
# ---------------------------------------------------------------------------

def test_array_default_separator():
    assert decode_entries([("array::tags", "a,b,c")]) == {"tags": ["a", "b", "c"]}

def test_array_inline_separator():
    assert decode_entries([("array(|)::tags", "a|b|c")]) == {"tags": ["a", "b", "c"]}

def test_array_option_separator():
    out = decode_entries([("array::tags", "a;b")], ParseOptions(default_array_separator=";"))
    assert out == {"tags": ["a", "b"]}

def test_inline_separator_beats_option():
    out = decode_entries([("array(|)::tags", "a|b")], ParseOptions(default_array_separator=";"))
    assert out == {"tags": ["a", "b"]}

def test_repeated_array_concatenates():
    out = decode_entries([("array::tags", "a,b"), ("array::tags", "c,d")])
    assert out == {"tags": ["a", "b", "c", "d"]}

def test_repeated_scalar_promotes_to_list():
    out = decode_entries([("string::x", "A"), ("string::x", "B")])
    assert out == {"x": ["A", "B"]}

def test_repeated_scalar_keeps_appending():
    out = decode_entries([("number::x", "1"), ("number::x", "2"), ("number::x", "3")])
    assert out == {"x": [1, 2, 3]}

def test_array_after_scalar_wraps():
    out = decode_entries([("string::tags", "first"), ("array::tags", "a,b")])
    assert out == {"tags": ["first", "a", "b"]}

def test_scalar_after_array_appends():
    out = decode_entries([("array::tags", "a,b"), ("tags", "c")])
    assert out == {"tags": ["a", "b", "c"]}


# ---------------------------------------------------------------------------
# list:: pairing
# ---------------------------------------------------------------------------

def test_list_pairing():
    out = decode_entries([
        ("list::key::env::0", "API_URL"),
        ("list::value::env::0", "https://x"),
        ("list::key::env::1", "API_TOKEN"),
        ("list::value::env::1", "secret"),
    ])
    assert out == {"env": {"API_URL": "https://x", "API_TOKEN": "secret"}}

def test_list_blank_key_skipped():
    out = decode_entries([("list::key::env::0", ""), ("list::value::env::0", "v")])
    assert out.get("env", {}) == {}

def test_list_applied_after_other_fields():
    out = decode_entries([
        ("list::key::env::0", "K"),
        ("list::value::env::0", "v"),
        ("string::env", "overwritten"),
    ])
    assert out == {"env": {"K": "v"}}

def test_invalid_list_dropped():
    assert decode_entries([("list::key::env", "K"), ("x", "1")]) == {"x": "1"}

def test_invalid_list_strict_raises():
    with pytest.raises(InvalidFieldName):
        decode_entries([("list::bad::env::0", "K")], STRICT)

def test_list_not_affected_by_ignore_empty():
    out = decode_entries(
        [("list::key::env::0", "K"), ("list::value::env::0", "")], IGNORE_EMPTY
    )
    assert out == {"env": {"K": ""}}


# ---------------------------------------------------------------------------
# Attachments
# ---------------------------------------------------------------------------

def test_attachment_passed_through_uncast():
    upload = io.BytesIO(b"\x89PNG")
    out = decode_entries([("number::user.avatar", upload)])
    assert out["user"]["avatar"] is upload

def test_attachment_replaces_without_merging():
    first, second = io.BytesIO(b"1"), io.BytesIO(b"2")
    out = decode_entries([("doc", first), ("doc", second)])
    assert out == {"doc": second}

def test_attachment_in_list_field_dropped():
    out = decode_entries([("list::key::env::0", "K"), ("list::value::env::0", b"raw")])
    assert out == {"env": {"K": ""}}


# ---------------------------------------------------------------------------
# strict
# ---------------------------------------------------------------------------

def test_strict_invalid_number_raises():
    with pytest.raises(InvalidNumber) as info:
        decode_entries([("number::age", "abc")], STRICT)
    assert info.value.raw == "abc"

def test_non_strict_invalid_number_kept():
    assert decode_entries([("number::age", "abc")]) == {"age": "abc"}

def test_strict_invalid_boolean_raises():
    with pytest.raises(InvalidBoolean):
        decode_entries([("boolean::ok", "perhaps")], STRICT)

def test_strict_does_not_affect_valid_input():
    assert decode_entries([("number::age", "3")], STRICT) == {"age": 3}


# ---------------------------------------------------------------------------
# ignore_empty
# ---------------------------------------------------------------------------

def test_ignore_empty_skips_blank_string():
    assert decode_entries([("string::name", "")], IGNORE_EMPTY) == {}
    assert decode_entries([("string::name", "   ")], IGNORE_EMPTY) == {}

def test_blank_string_kept_by_default():
    assert decode_entries([("string::name", "")]) == {"name": ""}

def test_ignore_empty_array_pieces():
    assert decode_entries([("array::tags", "a,,b")], IGNORE_EMPTY) == {"tags": ["a", "b"]}
    assert decode_entries([("array::tags", "a,,b")]) == {"tags": ["a", "b"]}

def test_ignore_empty_strips_json_list_items():
    out = decode_entries([("json::data", '{"items": ["a", "", null], "n": null}')], IGNORE_EMPTY)
    assert out == {"data": {"items": ["a"], "n": None}}

def test_ignore_empty_blank_array_skipped():
    assert decode_entries([("array::tags", " ")], IGNORE_EMPTY) == {}
    assert decode_entries([("array::tags", " ")]) == {"tags": []}


# ---------------------------------------------------------------------------
# strip_empty
# ---------------------------------------------------------------------------

class TestStripEmpty:
    def test_lists(self):
        assert strip_empty(["a", "", None, 0, False]) == ["a", 0, False]

    def test_nested_dicts(self):
        assert strip_empty({"a": {"b": ["", "x"]}, "c": ""}) == {"a": {"b": ["x"]}, "c": ""}

    def test_scalars_pass_through(self):
        assert strip_empty("") == ""
        assert strip_empty(3) == 3

    def test_idempotent(self):
        tree = {"a": ["", "x", None, ["", "y"]], "b": {"c": [None]}, "d": None}
        once = strip_empty(tree)
        assert strip_empty(once) == once

    def test_input_not_mutated(self):
        tree = {"a": ["", "x"]}
        strip_empty(tree)
        assert tree == {"a": ["", "x"]}


# ---------------------------------------------------------------------------
# parse_typed_form
# ---------------------------------------------------------------------------

def test_parse_query_string():
    out = parse_typed_form("number::user.age=30&array::tags=a,b&name=Joe")
    assert out == {"user": {"age": 30}, "tags": ["a", "b"], "name": "Joe"}

def test_parse_mapping():
    out = parse_typed_form({"number::age": "30", "array::tags": ["a,b", "c"]})
    assert out == {"age": 30, "tags": ["a", "b", "c"]}

def test_deterministic():
    entries = [
        ("string::x", "A"),
        ("string::x", "B"),
        ("list::key::env::0", "K"),
        ("list::value::env::0", "v"),
        ("json::j", '{"a": 1}'),
    ]
    assert decode_entries(entries) == decode_entries(entries)

def test_fresh_output_per_call():
    first = decode_entries([("x", "1")])
    first["y"] = "mutated"
    assert decode_entries([("x", "1")]) == {"x": "1"}


# ---------------------------------------------------------------------------
# Out-of-range values
# ---------------------------------------------------------------------------

def test_number_past_digit_limit_kept_as_string():
    raw = "1" * 5000
    assert decode_entries([("number::n", raw)]) == {"n": raw}

def test_number_past_digit_limit_strict_raises():
    with pytest.raises(InvalidNumber):
        decode_entries([("number::n", "1" * 5000)], STRICT)

def test_overflowing_date_kept_as_string():
    raw = "1 Jan 99999999999999999999 00:00:00"
    assert decode_entries([("date::d", raw)]) == {"d": raw}

def test_overflowing_date_strict_raises():
    with pytest.raises(InvalidDate):
        decode_entries([("date::d", "1 Jan 99999999999999999999 00:00:00")], STRICT)

def test_non_ascii_type_token_uses_full_name():
    assert decode_entries([("\u017ftring::x", "v")]) == {"\u017ftring::x": "v"}
