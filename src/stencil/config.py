"""Configuration loading for JSON, YAML and HCL inputs"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from pathlib import Path

import hcl2
import msgspec
import yaml
from lark.exceptions import LarkError
from pydantic import BaseModel

from stencil.exceptions import ConfigurationError, ConfigurationFileError
from stencil.values import Value, normalize

log = logging.getLogger(__name__)

STDIN = "-"


class ConfigurationFormat(str, Enum):
    JSON = "json"
    YAML = "yaml"
    HCL = "hcl"


_EXTENSIONS: dict[str, ConfigurationFormat] = {
    ".hcl": ConfigurationFormat.HCL,
    ".yml": ConfigurationFormat.YAML,
    ".yaml": ConfigurationFormat.YAML,
}


class ConfigurationLoader(yaml.SafeLoader):
    """SafeLoader that leaves timestamps as plain strings."""


ConfigurationLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag != "tag:yaml.org,2002:timestamp"
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class RenderSettings(BaseModel):
    """Inputs of a single render: where the template and configuration live"""

    template: Path
    configuration: str = STDIN  # "-" reads standard input
    format: ConfigurationFormat | None = None
    output: Path | None = None

    def resolve_format(self) -> ConfigurationFormat:
        """Explicit format if given, otherwise derived from the file extension"""
        if self.format is not None:
            return self.format
        return detect_format(self.configuration)


def detect_format(path: str | Path) -> ConfigurationFormat:
    """Guess the configuration format from a file extension, defaulting to JSON."""
    if str(path) == STDIN:
        return ConfigurationFormat.JSON
    return _EXTENSIONS.get(Path(path).suffix.lower(), ConfigurationFormat.JSON)


def load_configuration(text: str, format: ConfigurationFormat) -> Value:
    """Decode configuration text into a Value.

    Raises:
        ConfigurationError: If the text is not valid in the given format.
    """
    log.info("Parsing configuration using %s format", format.name)
    try:
        if format is ConfigurationFormat.YAML:
            data = yaml.load(text, Loader=ConfigurationLoader)
        elif format is ConfigurationFormat.HCL:
            data = hcl2.loads(text)
        else:
            data = msgspec.json.decode(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Could not parse YAML configuration: {exc}") from exc
    except (msgspec.DecodeError, LarkError, ValueError) as exc:
        raise ConfigurationError(
            f"Could not parse {format.name} configuration: {exc}"
        ) from exc
    return normalize(data)


def read_configuration(
    path: str | Path, format: ConfigurationFormat | None = None
) -> Value:
    """Read and decode a configuration file, or standard input for "-".

    Raises:
        ConfigurationFileError: If the input cannot be read.
        ConfigurationError: If the input cannot be decoded.
    """
    if format is None:
        format = detect_format(path)

    if str(path) == STDIN:
        log.info("Reading configuration from standard input stream")
        try:
            text = sys.stdin.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigurationFileError(STDIN, str(exc)) from exc
    else:
        log.info("Using configuration file '%s'", path)
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigurationFileError(str(path), str(exc)) from exc

    return load_configuration(text, format)
