# -*- coding: utf-8 -*-
"""
@author:XuMing(xuming624@qq.com)
@description: CLI entry point for the application
"""
import sys
import json
import argparse
from loguru import logger

from cmdquote.config import load_config, CLI_VERSION, DEFAULT_LOG_LEVEL, PLATFORM_CHOICES
from cmdquote.format_command import detect_platform, parse, quote


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the cmdquote command"""
    parser = argparse.ArgumentParser(description="cmdquote - parse and quote command lines")
    parser.add_argument("--config", "-c", type=str, help="Path to configuration file")
    parser.add_argument("--log-level", "-l", type=str, help="Log level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--version", "-v", action="store_true", help="Show version information")

    subparsers = parser.add_subparsers(dest="action")

    parse_cmd = subparsers.add_parser("parse", help="Split a command line into arguments")
    parse_cmd.add_argument("command_line", nargs="?", default="-",
                           help="Command line to parse, read from stdin if omitted or '-'")
    parse_cmd.add_argument("--platform", "-p", choices=PLATFORM_CHOICES,
                           help="Grammar to use (default: config or host)")
    parse_cmd.add_argument("--json", "-j", action="store_true", help="Print the arguments as a JSON array")

    quote_cmd = subparsers.add_parser("quote", help="Join arguments into a quoted command line")
    quote_cmd.add_argument("arguments", nargs="*", help="Arguments to quote")
    quote_cmd.add_argument("--platform", "-p", choices=PLATFORM_CHOICES,
                           help="Grammar to use (default: config or host)")
    return parser


def strip_line_ending(text: str) -> str:
    """Drop one trailing line ending, newline is content in the Windows grammar"""
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def main(argv=None):
    """Main entry point for the CLI"""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Show version and exit if requested
    if args.version:
        print(f"cmdquote v{CLI_VERSION}")
        return 0

    if not args.action:
        parser.print_help()
        return 2

    # Library logging is disabled on import, the CLI owns the sinks
    logger.enable("cmdquote")

    # Load configuration
    config = load_config(args.config)

    # Configure logging
    logger.remove()
    log_level = (args.log_level or config.log_level).upper()
    try:
        logger.add(sys.stderr, level=log_level)
    except ValueError:
        logger.add(sys.stderr, level=DEFAULT_LOG_LEVEL)
        logger.warning(f"Unknown log level {log_level!r}, using {DEFAULT_LOG_LEVEL}")

    platform = args.platform or config.platform or detect_platform()

    if args.action == "parse":
        command_line = args.command_line
        if command_line == "-":
            command_line = strip_line_ending(sys.stdin.read())
        result = parse(platform, command_line)
        if args.json or config.output_format == "json":
            print(json.dumps(result, ensure_ascii=False))
        else:
            for arg in result:
                print(arg)
    else:
        print(quote(platform, args.arguments))
    return 0


if __name__ == "__main__":
    sys.exit(main())
