"""
Configuration dataclasses for the binrepr command line.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .exceptions import ConfigError, InvalidRepresentationError
from .formatters import FormatOptions, Representation
from .hex_dump import PRESETS, DumpColumnWidth, DumpFormatOptions
from .logging_config import get_logger
from .radix import Radix

logger = get_logger('config')


def _radix(char: str, key: str) -> Radix:
    try:
        return Radix.from_char(char)
    except InvalidRepresentationError as e:
        raise ConfigError(f"Invalid {key} '{char}'. Valid values: b, o, d, x, X") from e


@dataclass
class DumpConfig:
    """Dump layout; a preset fixes radix and layout before the remaining overrides apply."""
    preset: Optional[str] = None
    column_width: int = 8
    two_columns: bool = True
    header: bool = True
    underline: Optional[str] = None
    line_numbers: bool = True
    index_radix: Optional[str] = None
    ascii: bool = False
    extended_ascii: bool = False
    column_separator: Optional[str] = None

    def __post_init__(self):
        if self.preset is not None and self.preset not in PRESETS:
            raise ConfigError(
                f"Unknown dump preset '{self.preset}'. Valid presets: {', '.join(PRESETS)}"
            )
        if self.column_width not in (8, 16, 32):
            raise ConfigError(f"Invalid dump column_width {self.column_width}. Valid values: 8, 16, 32")

    def to_options(self, radix: Optional[Radix] = None, colored: bool = False) -> DumpFormatOptions:
        """Build DumpFormatOptions; ``radix`` applies only when no preset is chosen."""
        try:
            if self.preset:
                options = DumpFormatOptions.preset(self.preset)
            else:
                options = DumpFormatOptions(radix=radix or Radix.UPPER_HEX)
                width = DumpColumnWidth(self.column_width)
                options = (options.two_columns_of(width) if self.two_columns
                           else options.one_column_of(width))
            if self.index_radix:
                options = options.with_index_radix(_radix(self.index_radix, 'dump index_radix'))
            if self.column_separator:
                options = options.separate_columns_with(self.column_separator)
            if self.underline:
                options = options.underline_column_index_with(self.underline)
            if self.extended_ascii:
                options = options.with_extended_ascii(True)
            elif self.ascii:
                options = options.with_ascii(True)
            return (options.with_header_line(self.header)
                    .with_line_numbers(self.line_numbers)
                    .with_color(colored))
        except ValueError as e:
            raise ConfigError(f"Invalid dump configuration: {e}") from e


@dataclass
class ReprConfig:
    """Default representation settings."""
    representation: str = "array"
    radix: str = "X"
    compact: bool = False
    colored: bool = False
    dump: DumpConfig = field(default_factory=DumpConfig)

    def __post_init__(self):
        if isinstance(self.dump, dict):
            dump_data = {k: v for k, v in self.dump.items() if not k.startswith('_')}
            try:
                self.dump = DumpConfig(**dump_data)
            except TypeError as e:
                raise ConfigError(f"Invalid dump configuration: {e}") from e

        try:
            Representation(self.representation)
        except ValueError as e:
            valid = ', '.join(r.value for r in Representation)
            raise ConfigError(
                f"Invalid representation '{self.representation}'. Valid values: {valid}"
            ) from e
        _radix(self.radix, 'radix')

    @property
    def radix_format(self) -> Radix:
        return Radix.from_char(self.radix)

    def to_options(self) -> FormatOptions:
        """Build the options object for the configured representation."""
        representation = Representation(self.representation)
        if representation is Representation.DUMP:
            return self.dump.to_options(self.radix_format, self.colored)
        options = representation.default_options().with_compact(self.compact)
        if representation is Representation.BASE64:
            return options
        return options.with_byte_radix(self.radix_format).with_color(self.colored)

    @classmethod
    def from_json(cls, path: str | Path) -> 'ReprConfig':
        """Load ReprConfig from JSON file; a missing file yields the defaults."""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.debug(f"No config file at {path}, using defaults")
            return cls()
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")
        try:
            return cls(**{k: v for k, v in data.items() if not k.startswith('_')})
        except TypeError as e:
            raise ConfigError(f"Invalid configuration in {path}: {e}") from e


def create_default_config(path: str = "binrepr_config.json") -> bool:
    """
    Create a default configuration file if it doesn't exist.

    Returns:
        True if the file was written
    """
    config = {
        "representation": "array",
        "_comment": "One of: array, string, dump, base64",
        "radix": "X",
        "_radix_comment": "Byte radix: b (binary), o (octal), d (decimal), x (lower hex), X (upper hex)",
        "compact": False,
        "colored": False,
        "dump": {
            "preset": None,
            "_comment": f"Optional preset: {', '.join(PRESETS)}",
            "column_width": 8,
            "two_columns": True,
            "header": True,
            "line_numbers": True,
            "ascii": False,
            "extended_ascii": False
        }
    }

    path_obj = Path(path)
    if path_obj.exists():
        return False
    with open(path_obj, 'w', encoding='utf-8') as f:
        json.dump(config, f, indent=2)
    return True
