#!/usr/bin/env python3
"""
binrepr CLI
Format bytes as array/string/dump/base64 text and parse such text back.
"""

import sys
import argparse

try:
    import argcomplete
    ARGCOMPLETE_AVAILABLE = True
except ImportError:
    ARGCOMPLETE_AVAILABLE = False

from binrepr import (
    Binary, ReprConfig, Representation, format_binary, parse_binary,
    BinReprError, ConfigError, InvalidByteRepresentationError,
)
from binrepr.config import create_default_config
from binrepr.hex_dump import PRESETS
from binrepr.logging_config import LEVELS, LoggingManager, setup_logging, get_logger

logger = get_logger('cli')

REPRESENTATIONS = [r.value for r in Representation]
RADIX_CHARS = ['b', 'o', 'd', 'x', 'X']


def preset_completer(prefix, parsed_args, **kwargs):
    """Custom completer for --preset."""
    return [p for p in PRESETS if p.startswith(prefix)]


def read_input(path: str) -> bytes:
    """Read bytes from a file path, or stdin for '-'."""
    if path == '-':
        return sys.stdin.buffer.read()
    with open(path, 'rb') as f:
        return f.read()


def build_config(args) -> ReprConfig:
    """Load the config file and apply command-line overrides."""
    config = ReprConfig.from_json(args.config)

    if getattr(args, 'repr', None):
        config.representation = args.repr
    if getattr(args, 'radix', None):
        config.radix = args.radix
    if getattr(args, 'compact', False):
        config.compact = True
    if getattr(args, 'colored', False):
        config.colored = True

    dump = config.dump
    if getattr(args, 'preset', None):
        dump.preset = args.preset
        config.representation = Representation.DUMP.value
    if getattr(args, 'columns', None):
        dump.column_width = args.columns
    if getattr(args, 'one_column', False):
        dump.two_columns = False
    if getattr(args, 'ascii', False):
        dump.ascii = True
    if getattr(args, 'extended_ascii', False):
        dump.extended_ascii = True
    if getattr(args, 'no_header', False):
        dump.header = False

    # Re-run validation on the overridden values
    config = ReprConfig(config.representation, config.radix, config.compact, config.colored,
                        dump=vars(dump))
    logger.info(f"Using {config.representation} representation, radix {config.radix}"
                f"{', compact' if config.compact else ''}")
    return config


def command_format(args) -> int:
    if args.text is not None:
        data = Binary.from_value(args.text)
    elif args.hex is not None:
        try:
            data = Binary(bytes.fromhex(args.hex))
        except ValueError as e:
            print(f"Error: Invalid hex input: {e}")
            return 1
    else:
        data = Binary(read_input(args.input))

    config = build_config(args)
    logger.info(f"Formatting {len(data)} bytes as {config.representation}")
    output = format_binary(data, config.to_options())
    print(output, end='' if output.endswith('\n') else '\n')
    return 0


def command_parse(args) -> int:
    if args.text is not None:
        text = args.text
    else:
        try:
            text = read_input(args.input).decode('utf-8')
        except UnicodeDecodeError as e:
            print(f"Error: Input is not valid UTF-8 text: {e}")
            return 1
    text = text.strip()

    try:
        data = parse_binary(text, args.repr)
    except InvalidByteRepresentationError as e:
        print(f"Error: {e} ({e.cause.kind.name.lower()})")
        return 1
    except BinReprError as e:
        print(f"Error: {e}")
        return 1

    logger.info(f"Parsed {len(data)} bytes")
    if args.output:
        with open(args.output, 'wb') as f:
            f.write(bytes(data))
        print(f"Wrote {len(data)} bytes to {args.output}")
        return 0

    if args.to:
        config = build_config(argparse.Namespace(
            config=args.config, repr=args.to, radix=args.radix,
            compact=args.compact, colored=args.colored,
        ))
        output = format_binary(data, config.to_options())
        print(output, end='' if output.endswith('\n') else '\n')
    else:
        print(bytes(data).hex())
    return 0


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Binary representation formatter and parser')
    parser.add_argument('--config', default='binrepr_config.json',
                        help='Path to configuration file')
    parser.add_argument('--create-config', action='store_true',
                        help='Create default configuration file')
    parser.add_argument('--log-level', default='CRITICAL',
                        choices=list(LEVELS),
                        help='Set logging level (NONE = disable logging)')
    parser.add_argument('--debug-modules', type=str,
                        help='Comma-separated list of modules to debug (e.g., array,string,dump)')

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    format_parser = subparsers.add_parser('format', help='Format bytes as text')
    source = format_parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--input', '-i', type=str, help="Read bytes from file ('-' for stdin)")
    source.add_argument('--text', '-t', type=str, help='Format the UTF-8 bytes of this text')
    source.add_argument('--hex', type=str, help='Format bytes given as hex digits (e.g., 48656c6c6f)')
    format_parser.add_argument('--repr', '-r', choices=REPRESENTATIONS,
                               help='Representation (default from config: array)')
    format_parser.add_argument('--radix', choices=RADIX_CHARS,
                               help='Byte radix: b, o, d, x or X')
    format_parser.add_argument('--compact', action='store_true',
                               help='Compact form (array: minimal digits, string: no underscores, base64: no padding)')
    format_parser.add_argument('--colored', action='store_true',
                               help='Use ANSI colors')
    preset_arg = format_parser.add_argument('--preset', choices=list(PRESETS),
                                            help='Dump preset (implies --repr dump)')
    if ARGCOMPLETE_AVAILABLE:
        preset_arg.completer = preset_completer
    format_parser.add_argument('--columns', type=int, choices=[8, 16, 32],
                               help='Dump column width in bytes')
    format_parser.add_argument('--one-column', action='store_true',
                               help='Dump with a single column')
    format_parser.add_argument('--ascii', action='store_true',
                               help='Dump printable bytes as characters')
    format_parser.add_argument('--extended-ascii', action='store_true',
                               help='Like --ascii, also drawing control bytes as glyphs')
    format_parser.add_argument('--no-header', action='store_true',
                               help='Omit the dump column header')

    parse_parser = subparsers.add_parser('parse', help='Parse text back into bytes')
    parse_parser.add_argument('text', nargs='?', help='Representation text')
    parse_parser.add_argument('--input', '-i', type=str, help="Read text from file ('-' for stdin)")
    parse_parser.add_argument('--repr', '-r', choices=REPRESENTATIONS,
                              help='Representation of the input (default: detect array or string)')
    parse_parser.add_argument('--output', '-o', type=str, help='Write raw bytes to this file')
    parse_parser.add_argument('--to', choices=REPRESENTATIONS,
                              help='Re-render the parsed bytes (default: plain hex)')
    parse_parser.add_argument('--radix', choices=RADIX_CHARS, help='Byte radix for --to')
    parse_parser.add_argument('--compact', action='store_true', help='Compact form for --to')
    parse_parser.add_argument('--colored', action='store_true', help='Use ANSI colors for --to')

    if ARGCOMPLETE_AVAILABLE:
        argcomplete.autocomplete(parser)

    return parser


def main(argv=None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.create_config:
        if create_default_config(args.config):
            print(f"Created default config: {args.config}")
        else:
            print(f"Config already exists: {args.config}")
        return 0

    if not args.command:
        parser.print_help()
        return 0

    try:
        module_levels = LoggingManager.parse_module_levels(args.debug_modules)
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    setup_logging(args.log_level, module_levels, use_color=args.colored)

    if args.command == 'parse' and args.text is None and args.input is None:
        print("Error: Provide representation text or --input")
        return 1

    try:
        if args.command == 'format':
            return command_format(args)
        return command_parse(args)
    except ConfigError as e:
        print(f"Error: {e}")
        return 1
    except OSError as e:
        print(f"Error: {e}")
        return 1


if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted")
        sys.exit(0)
