"""Functions that read process state: environment variables and the clock."""

from __future__ import annotations

import logging
import os
from datetime import datetime

from stencil.exceptions import ArgumentValueError, InvalidTypeError
from stencil.functions.registry import Category, Parameter, Shape, builtin
from stencil.values import Value, kind_of

log = logging.getLogger(__name__)

NOW = "now"


@builtin(
    "environment",
    Category.SYSTEM,
    accepts=(Shape.STRING,),
    description="Value of the named environment variable, or null when unset",
)
def environment(value: str) -> str | None:
    result = os.environ.get(value)
    if result is None:
        log.debug("Environment variable '%s' is not set", value)
    return result


@builtin(
    "parseFormatDateTime",
    Category.SYSTEM,
    accepts=(Shape.STRING,),
    parameters=(
        Parameter("parseFormat"),
        Parameter("outputFormat", Shape.STRING),
    ),
    description="Parse a date-time with one strftime format and print it with another; 'now' is the current local time",
)
def parse_format_date_time(value: str, parse_format: Value, output_format: str) -> str:
    """Reformat a date-time string.

    The value "now" ignores parse_format and uses the current local time,
    with its UTC offset, so that %z and %Z in output_format are filled in.
    """
    if value == NOW:
        moment = datetime.now().astimezone()
    else:
        if not isinstance(parse_format, str):
            raise InvalidTypeError(
                f"parseFormatDateTime needs a string parse format, got {kind_of(parse_format).value}"
            )
        try:
            moment = datetime.strptime(value, parse_format)
        except ValueError as exc:
            raise ArgumentValueError(
                f"Could not parse date-time with value '{value}' and parse "
                f"format string '{parse_format}': {exc}"
            ) from exc

    try:
        return moment.strftime(output_format)
    except ValueError as exc:
        raise ArgumentValueError(
            f"Could not format date-time with format string '{output_format}': {exc}"
        ) from exc
