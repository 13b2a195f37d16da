"""Stencil Exceptions

Every error raised by stencil derives from StencilError and carries the
process exit code the CLI maps it to.
"""

from __future__ import annotations

from enum import Enum


class StencilError(Exception):
    """Base exception for all stencil errors."""

    exit_code: int = 1

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class TemplateFileError(StencilError):
    """Raised when the template file cannot be read."""

    exit_code = 1

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Could not read template file '{path}': {reason}")


class ConfigurationFileError(StencilError):
    """Raised when the configuration input cannot be read."""

    exit_code = 3

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Could not read configuration file '{path}': {reason}")


class ConfigurationError(StencilError):
    """Raised when the configuration input cannot be decoded."""

    exit_code = 4


class TemplateSyntaxError(StencilError):
    """Raised when the template source does not match the grammar."""

    exit_code = 5

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class RenderErrorKind(Enum):
    """Discriminates render errors for callers that map them to messages."""

    UNKNOWN_FUNCTION = "unknown-function"
    TYPE = "type"
    ARGUMENT_VALUE = "argument-value"
    LITERAL_PARSE = "literal-parse"
    REQUIRED_ARGUMENT_MISSING = "required-argument-missing"
    INVALID_REGEX = "invalid-regex"
    JSON_PARSE = "json-parse"
    JSON_SERIALIZATION = "json-serialization"


class TemplateRenderError(StencilError):
    """Base class for errors raised while evaluating a template."""

    exit_code = 6
    kind: RenderErrorKind

    def __init__(self, detail: str, message: str):
        self.detail = detail
        super().__init__(message)


class UnknownFunctionError(TemplateRenderError):
    exit_code = 10
    kind = RenderErrorKind.UNKNOWN_FUNCTION

    def __init__(self, name: str):
        self.name = name
        super().__init__(name, f"Unknown function '{name}'")


class InvalidTypeError(TemplateRenderError):
    """A value or argument does not have the shape a function requires."""

    exit_code = 11
    kind = RenderErrorKind.TYPE

    def __init__(self, detail: str):
        super().__init__(detail, f"Invalid type: {detail}")


class ArgumentValueError(TemplateRenderError):
    """An argument has the right type but a value the function rejects."""

    exit_code = 12
    kind = RenderErrorKind.ARGUMENT_VALUE

    def __init__(self, detail: str):
        super().__init__(detail, f"Invalid arguments: {detail}")


class LiteralParseError(TemplateRenderError):
    exit_code = 13
    kind = RenderErrorKind.LITERAL_PARSE

    def __init__(self, literal: str):
        super().__init__(literal, f"Could not parse literal '{literal}'")


class RequiredArgumentMissingError(TemplateRenderError):
    exit_code = 14
    kind = RenderErrorKind.REQUIRED_ARGUMENT_MISSING

    def __init__(self, function: str, position: int):
        self.function = function
        self.position = position
        super().__init__(
            function,
            f"Argument {position} is missing for function '{function}'",
        )


class InvalidRegexError(TemplateRenderError):
    exit_code = 15
    kind = RenderErrorKind.INVALID_REGEX

    def __init__(self, pattern: str, reason: str = ""):
        self.pattern = pattern
        message = f"Invalid regular expression given: '{pattern}'"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(pattern, message)


class JsonParseError(TemplateRenderError):
    exit_code = 16
    kind = RenderErrorKind.JSON_PARSE

    def __init__(self, reason: str):
        super().__init__(reason, f"Could not parse JSON: '{reason}'")


class JsonSerializationError(TemplateRenderError):
    exit_code = 17
    kind = RenderErrorKind.JSON_SERIALIZATION

    def __init__(self, reason: str = ""):
        message = "Could not serialize JSON"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(reason, message)
