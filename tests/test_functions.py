"""Tests for the built-in function library."""

from datetime import datetime

import pytest

from stencil.exceptions import (
    ArgumentValueError,
    InvalidRegexError,
    InvalidTypeError,
    JsonParseError,
    JsonSerializationError,
    RenderErrorKind,
    RequiredArgumentMissingError,
    UnknownFunctionError,
)
from stencil.functions import (
    Category,
    FunctionDefinition,
    FunctionRegistry,
    apply_function,
    get_registry,
)
from stencil.values import values_equal


def call(value, name, *arguments):
    return apply_function(value, name, list(arguments))


# =============================================================================
# Registry
# =============================================================================


class TestRegistry:
    def test_builtins_registered(self):
        registry = get_registry()
        for name in ["upperCase", "chunked", "default", "toJson", "environment", "invert"]:
            assert name in registry

    def test_every_category_has_functions(self):
        registry = get_registry()
        for category in Category:
            assert registry.by_category(category), category

    def test_duplicate_registration_rejected(self):
        registry = FunctionRegistry()
        definition = FunctionDefinition(
            name="twice", category=Category.LOGIC, implementation=lambda value: value
        )
        registry.register(definition)
        with pytest.raises(ValueError, match="already registered"):
            registry.register(definition)

    def test_signature_marks_optional_parameters(self):
        definition = get_registry().get("substring")
        assert definition.signature == "substring(from: unsigned integer, [to: unsigned integer])"
        assert get_registry().get("trim").signature == "trim"

    def test_unknown_function(self):
        with pytest.raises(UnknownFunctionError) as excinfo:
            call("x", "doesNotExist")
        assert excinfo.value.name == "doesNotExist"
        assert excinfo.value.detail == "doesNotExist"
        assert excinfo.value.kind is RenderErrorKind.UNKNOWN_FUNCTION

    def test_missing_required_argument(self):
        with pytest.raises(RequiredArgumentMissingError) as excinfo:
            call("a,b", "split")
        assert excinfo.value.function == "split"
        assert excinfo.value.position == 1

    def test_extra_arguments_are_ignored(self):
        assert call("abc", "upperCase", "ignored") == "ABC"

    def test_wrong_value_shape(self):
        with pytest.raises(InvalidTypeError, match="upperCase"):
            call(42, "upperCase")

    def test_wrong_argument_shape(self):
        with pytest.raises(InvalidTypeError, match="separator"):
            call("a,b", "split", 1)


# =============================================================================
# Strings
# =============================================================================


class TestCaseConversion:
    def test_lower_upper(self):
        assert call("MiXeD", "lowerCase") == "mixed"
        assert call("MiXeD", "upperCase") == "MIXED"

    def test_kebab_and_snake(self):
        assert call("Hello World", "kebabCase") == "hello-world"
        assert call("Hello  World!", "snakeCase") == "hello_world_"
        assert call("my_var name", "kebabCase") == "my_var-name"

    def test_camel_and_pascal(self):
        assert call("hello big world", "camelCase") == "helloBigWorld"
        assert call("hello-big_world", "pascalCase") == "HelloBigWorld"

    def test_capitalize(self):
        assert call("hello world", "capitalize") == "Hello world"
        assert call("", "capitalize") == ""
        assert call("hello big\tworld", "capitalizeWords") == "Hello Big\tWorld"


class TestTrimAndSplit:
    def test_trim_variants(self):
        assert call("  a b  ", "trim") == "a b"
        assert call("  a b  ", "trimLeft") == "a b  "
        assert call("  a b  ", "trimRight") == "  a b"

    def test_trim_idempotent(self):
        once = call(" \t text \n", "trim")
        assert call(once, "trim") == once

    def test_split_keeps_empty_segments(self):
        assert call("a,,b", "split", ",") == ["a", "", "b"]

    def test_split_on_empty_separator(self):
        assert call("ab", "split", "") == ["", "a", "b", ""]

    def test_lines(self):
        assert call("\n  one\r\ntwo\n\nthree\n", "lines") == ["one", "two", "", "three"]
        assert call("   ", "lines") == []


class TestRegex:
    def test_matches(self):
        assert call("release-1.2", "matches", r"\d+\.\d+") is True
        assert call("release", "matches", r"^\d") is False

    def test_regex_replace_numbered_groups(self):
        assert call("John Smith", "regexReplace", r"(\w+) (\w+)", "$2, $1") == "Smith, John"

    def test_regex_replace_named_groups_and_dollar(self):
        result = call("cost 5", "regexReplace", r"(?P<amount>\d+)", "$$${amount}")
        assert result == "cost $5"

    def test_regex_replace_unknown_group_is_empty(self):
        assert call("ab", "regexReplace", "a", "[$9]") == "[]b"

    def test_invalid_regex(self):
        with pytest.raises(InvalidRegexError) as excinfo:
            call("text", "matches", "(")
        assert excinfo.value.pattern == "("
        assert excinfo.value.kind is RenderErrorKind.INVALID_REGEX


class TestSlicing:
    def test_substring(self):
        assert call("hello", "substring", 1, 3) == "el"
        assert call("hello", "substring", 2) == "llo"
        assert call("hello", "substring", 10) == ""
        assert call("hello", "substring", 3, 1) == ""

    def test_substring_rejects_negative_index(self):
        with pytest.raises(InvalidTypeError):
            call("hello", "substring", -1)

    def test_starts_ends_with(self):
        assert call("stencil", "startsWith", "sten") is True
        assert call("stencil", "endsWith", "sten") is False

    def test_abbreviate(self):
        assert call("hello world", "abbreviate", 5) == "hell…"
        assert call("hi", "abbreviate", 5) == "hi"
        assert call("hello", "abbreviate", 0) == "…"

    def test_replace(self):
        assert call("a-b-c", "replace", "-", "+") == "a+b+c"


# =============================================================================
# Sequences
# =============================================================================


class TestSequences:
    def test_length(self):
        assert call("abc", "length") == 3
        assert call([1, 2], "length") == 2
        assert call({"a": 1}, "length") == 1
        with pytest.raises(InvalidTypeError):
            call(5, "length")

    def test_reverse(self):
        assert call("abc", "reverse") == "cba"
        assert call([1, 2, 3], "reverse") == [3, 2, 1]
        with pytest.raises(InvalidTypeError):
            call({"a": 1}, "reverse")

    def test_take_and_drop_clamp(self):
        assert call([1, 2, 3], "take", 2) == [1, 2]
        assert call("abc", "take", 5) == "abc"
        assert call([1, 2, 3], "drop", 1) == [2, 3]
        assert call("abc", "drop", 5) == ""

    def test_first_last_index(self):
        assert call([1, 2, 3], "first") == 1
        assert call([1, 2, 3], "last") == 3
        assert call([], "first") is None
        assert call([1, 2], "index", 1) == 2
        assert call([1, 2], "index", 5) is None

    def test_contains(self):
        assert call("hello", "contains", "ell") is True
        assert call([1, 2], "contains", 2) is True
        assert call([1, 2], "contains", 2.0) is False
        with pytest.raises(InvalidTypeError):
            call("hello", "contains", 1)

    def test_unique_keeps_first_occurrence(self):
        value = [1, "1", 1, {"a": 1}, {"a": 1}, True]
        assert call(value, "unique") == [1, "1", {"a": 1}, True]

    def test_unique_idempotent(self):
        once = call([3, 1, 3, 2, 1], "unique")
        assert call(once, "unique") == once

    def test_chunked(self):
        assert call([1, 2, 3, 4, 5], "chunked", 2, 0) == [[1, 2], [3, 4], [5]]
        assert call([1, 2, 3, 4], "chunked", 3, 1) == [[1, 2, 3], [3, 4]]
        assert call([], "chunked", 2, 1) == []

    def test_chunked_rejects_large_overlap(self):
        with pytest.raises(ArgumentValueError) as excinfo:
            call([1, 2, 3], "chunked", 3, 6)
        assert "3" in excinfo.value.message
        assert "6" in excinfo.value.message
        assert excinfo.value.kind is RenderErrorKind.ARGUMENT_VALUE

    def test_alternate(self):
        assert call(0, "alternate", ["odd", "even"]) == "odd"
        assert call(3, "alternate", ["odd", "even"]) == "even"
        assert call(3, "alternate", []) is None


# =============================================================================
# Objects
# =============================================================================


class TestObjects:
    def test_keys_and_values(self):
        value = {"b": 1, "a": [2]}
        assert call(value, "keys") == ["b", "a"]
        assert call(value, "values") == [1, [2]]

    def test_contains_key_and_value(self):
        assert call({"a": 1}, "containsKey", "a") is True
        assert call({"a": 1}, "containsKey", "b") is False
        assert call({"a": 1}, "containsValue", 1) is True
        assert call({"a": 1}, "containsValue", True) is False

    def test_invert(self):
        assert call({"a": "x", "b": "y"}, "invert") == {"x": "a", "y": "b"}

    def test_invert_requires_string_values(self):
        with pytest.raises(InvalidTypeError, match="'a'"):
            call({"a": 1}, "invert")


# =============================================================================
# Logic
# =============================================================================


class TestLogic:
    def test_default_versus_coalesce(self):
        assert call(False, "default", "x") == "x"
        assert call(False, "coalesce", "x") is False
        assert call(None, "default", "x") == "x"
        assert call(None, "coalesce", "x") == "x"

    def test_default_keeps_truthy_value(self):
        assert call("set", "default", "x") == "set"

    def test_empty_and_negate(self):
        assert call("", "empty") is True
        assert call([0], "empty") is False
        assert call(0, "negate") is True
        assert call("yes", "negate") is False

    def test_quantifiers(self):
        assert call([1, "a", True], "all") is True
        assert call([1, 0], "all") is False
        assert call([0, None, "x"], "any") is True
        assert call([0, None], "none") is True
        assert call([1, ""], "some") is True
        assert call([1, "a"], "some") is False

    def test_quantifiers_on_empty_array(self):
        assert call([], "all") is True
        assert call([], "any") is False
        assert call([], "none") is True
        assert call([], "some") is False


# =============================================================================
# Conversion
# =============================================================================


class TestJson:
    def test_to_json_is_compact(self):
        value = {"a": [1, 2.5, None, True, "x"]}
        assert call(value, "toJson") == '{"a":[1,2.5,null,true,"x"]}'

    def test_to_pretty_json(self):
        assert call({"a": 1}, "toPrettyJson") == '{\n  "a": 1\n}'

    def test_from_json_keeps_number_kinds(self):
        result = call('{"i": 1, "f": 1.0}', "fromJson")
        assert values_equal(result, {"i": 1, "f": 1.0})
        assert isinstance(result["i"], int)
        assert isinstance(result["f"], float)

    @pytest.mark.parametrize(
        "value",
        [None, True, -3, 0.25, "text", [1, [2, {}]], {"a": {"b": [None, "c"]}}],
    )
    def test_round_trip(self, value):
        assert values_equal(call(call(value, "toJson"), "fromJson"), value)

    def test_malformed_json(self):
        with pytest.raises(JsonParseError):
            call("{not json", "fromJson")

    def test_integer_too_large_to_serialize(self):
        with pytest.raises(JsonSerializationError) as excinfo:
            call(2**65, "toJson")
        assert excinfo.value.kind is RenderErrorKind.JSON_SERIALIZATION


# =============================================================================
# System
# =============================================================================


class TestEnvironment:
    def test_set_variable(self, monkeypatch):
        monkeypatch.setenv("STENCIL_TEST_VARIABLE", "value")
        assert call("STENCIL_TEST_VARIABLE", "environment") == "value"

    def test_unset_variable_is_null(self, monkeypatch):
        monkeypatch.delenv("STENCIL_TEST_VARIABLE", raising=False)
        assert call("STENCIL_TEST_VARIABLE", "environment") is None


class TestParseFormatDateTime:
    def test_reformat(self):
        result = call("2024-01-31 13:45", "parseFormatDateTime", "%Y-%m-%d %H:%M", "%d/%m/%Y")
        assert result == "31/01/2024"

    def test_now_ignores_parse_format(self):
        result = call("now", "parseFormatDateTime", "ignored", "%Y")
        assert result in {str(datetime.now().year), str(datetime.now().year - 1)}

    def test_now_accepts_null_parse_format(self):
        result = call("now", "parseFormatDateTime", None, "%Y")
        assert result in {str(datetime.now().year), str(datetime.now().year - 1)}

    def test_parse_format_must_be_string_for_dates(self):
        with pytest.raises(InvalidTypeError):
            call("2024-01-31", "parseFormatDateTime", None, "%Y")

    def test_unparseable_value(self):
        with pytest.raises(ArgumentValueError, match="31.01.2024"):
            call("31.01.2024", "parseFormatDateTime", "%Y-%m-%d", "%Y")
