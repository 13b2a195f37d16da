"""String functions: case conversion, trimming, searching and slicing."""

from __future__ import annotations

import re

from stencil.exceptions import InvalidRegexError
from stencil.functions.registry import Category, Parameter, Shape, builtin

STRING = (Shape.STRING,)

_KEBAB_SEPARATORS = re.compile(r"[^a-zA-Z0-9_]+")
_SNAKE_SEPARATORS = re.compile(r"[^a-zA-Z0-9-]+")
# $$, ${name} and $name references in regexReplace replacements
_REPLACEMENT_REFERENCE = re.compile(r"\$(?:\$|\{([^}]*)\}|([_0-9A-Za-z]+))")


def _compile(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise InvalidRegexError(pattern, str(exc)) from exc


def _join_words(text: str, capitalize_first: bool) -> str:
    """Drop non-alphanumeric separators, upper-casing the character after each."""
    result = []
    to_upper = capitalize_first
    for char in text:
        if char.isalnum():
            result.append(char.upper() if to_upper else char)
            to_upper = False
        else:
            to_upper = True
    return "".join(result)


@builtin("lowerCase", Category.STRING, accepts=STRING, description="Lower-case the string")
def lower_case(value: str) -> str:
    return value.lower()


@builtin("upperCase", Category.STRING, accepts=STRING, description="Upper-case the string")
def upper_case(value: str) -> str:
    return value.upper()


@builtin(
    "kebabCase",
    Category.STRING,
    accepts=STRING,
    description="Lower-case, separator runs become '-' (e.g., 'Hello World' -> 'hello-world')",
)
def kebab_case(value: str) -> str:
    return _KEBAB_SEPARATORS.sub("-", value.lower())


@builtin(
    "snakeCase",
    Category.STRING,
    accepts=STRING,
    description="Lower-case, separator runs become '_' (e.g., 'Hello World' -> 'hello_world')",
)
def snake_case(value: str) -> str:
    return _SNAKE_SEPARATORS.sub("_", value.lower())


@builtin(
    "camelCase",
    Category.STRING,
    accepts=STRING,
    description="Join words, upper-casing each word after the first (e.g., 'hello world' -> 'helloWorld')",
)
def camel_case(value: str) -> str:
    return _join_words(value, capitalize_first=False)


@builtin(
    "pascalCase",
    Category.STRING,
    accepts=STRING,
    description="Join words, upper-casing every word (e.g., 'hello world' -> 'HelloWorld')",
)
def pascal_case(value: str) -> str:
    return _join_words(value, capitalize_first=True)


@builtin("capitalize", Category.STRING, accepts=STRING, description="Upper-case the first character")
def capitalize(value: str) -> str:
    return value[:1].upper() + value[1:]


@builtin(
    "capitalizeWords",
    Category.STRING,
    accepts=STRING,
    description="Upper-case the first character of every whitespace-separated word",
)
def capitalize_words(value: str) -> str:
    result = []
    to_upper = True
    for char in value:
        if char.isspace():
            to_upper = True
            result.append(char)
        else:
            result.append(char.upper() if to_upper else char)
            to_upper = False
    return "".join(result)


@builtin("trim", Category.STRING, accepts=STRING, description="Strip surrounding whitespace")
def trim(value: str) -> str:
    return value.strip()


@builtin("trimLeft", Category.STRING, accepts=STRING, description="Strip leading whitespace")
def trim_left(value: str) -> str:
    return value.lstrip()


@builtin("trimRight", Category.STRING, accepts=STRING, description="Strip trailing whitespace")
def trim_right(value: str) -> str:
    return value.rstrip()


@builtin(
    "split",
    Category.STRING,
    accepts=STRING,
    parameters=(Parameter("separator", Shape.STRING),),
    description="Split on a literal separator, keeping empty segments",
)
def split(value: str, separator: str) -> list:
    if not separator:
        # An empty separator matches between every character and at both ends
        return ["", *value, ""]
    return value.split(separator)


@builtin("lines", Category.STRING, accepts=STRING, description="Trim, then split into lines")
def lines(value: str) -> list:
    text = value.strip()
    if not text:
        return []
    return [line.removesuffix("\r") for line in text.split("\n")]


@builtin(
    "matches",
    Category.STRING,
    accepts=STRING,
    parameters=(Parameter("pattern", Shape.STRING),),
    description="Whether the regular expression matches anywhere in the string",
)
def matches(value: str, pattern: str) -> bool:
    return _compile(pattern).search(value) is not None


@builtin(
    "regexReplace",
    Category.STRING,
    accepts=STRING,
    parameters=(
        Parameter("pattern", Shape.STRING),
        Parameter("replacement", Shape.STRING),
    ),
    description="Replace every regex match; the replacement may use $1, ${name} and $$",
)
def regex_replace(value: str, pattern: str, replacement: str) -> str:
    regex = _compile(pattern)

    def expand(match: re.Match[str]) -> str:
        def reference(ref: re.Match[str]) -> str:
            if ref.group(0) == "$$":
                return "$"
            name = ref.group(1) if ref.group(1) is not None else ref.group(2)
            try:
                group = match.group(int(name) if name.isdigit() else name)
            except IndexError:
                return ""
            return group or ""

        return _REPLACEMENT_REFERENCE.sub(reference, replacement)

    return regex.sub(expand, value)


@builtin(
    "substring",
    Category.STRING,
    accepts=STRING,
    parameters=(
        Parameter("from", Shape.UNSIGNED),
        Parameter("to", Shape.UNSIGNED, required=False),
    ),
    description="Characters between two indices, clamped to the string",
)
def substring(value: str, start: int, end: int | None = None) -> str:
    if end is None:
        return value[start:]
    return value[start:end]


@builtin(
    "startsWith",
    Category.STRING,
    accepts=STRING,
    parameters=(Parameter("prefix", Shape.STRING),),
)
def starts_with(value: str, prefix: str) -> bool:
    return value.startswith(prefix)


@builtin(
    "endsWith",
    Category.STRING,
    accepts=STRING,
    parameters=(Parameter("suffix", Shape.STRING),),
)
def ends_with(value: str, suffix: str) -> bool:
    return value.endswith(suffix)


@builtin(
    "abbreviate",
    Category.STRING,
    accepts=STRING,
    parameters=(Parameter("length", Shape.UNSIGNED),),
    description="Truncate to the given length, ending with an ellipsis",
)
def abbreviate(value: str, length: int) -> str:
    if len(value) <= length:
        return value
    return value[: max(length, 1) - 1] + "…"


@builtin(
    "replace",
    Category.STRING,
    accepts=STRING,
    parameters=(
        Parameter("search", Shape.STRING),
        Parameter("replacement", Shape.STRING),
    ),
    description="Replace every occurrence of a literal substring",
)
def replace(value: str, search: str, replacement: str) -> str:
    return value.replace(search, replacement)
