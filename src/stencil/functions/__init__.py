"""Built-in function library.

Each module in this package registers its functions with the @builtin
decorator:

- strings: lowerCase, kebabCase, split, regexReplace, substring, abbreviate
- sequences: length, reverse, take, drop, unique, chunked, alternate
- objects: keys, values, invert, containsKey
- logic: default, coalesce, empty, all, any, none, some
- conversion: toJson, toPrettyJson, fromJson
- system: environment, parseFormatDateTime

Importing this package registers every built-in.
"""

from stencil.functions.registry import (
    Category,
    FunctionDefinition,
    FunctionRegistry,
    Parameter,
    Shape,
    apply_function,
    builtin,
    get_registry,
)

# Import all function modules to trigger registration (noqa: F401 for side-effect imports)
from stencil.functions import (  # noqa: F401
    conversion,
    logic,
    objects,
    sequences,
    strings,
    system,
)

__all__ = [
    "Category",
    "FunctionDefinition",
    "FunctionRegistry",
    "Parameter",
    "Shape",
    "apply_function",
    "builtin",
    "get_registry",
]
