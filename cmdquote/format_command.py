# -*- coding: utf-8 -*-
"""
@author:XuMing(xuming624@qq.com)
@description: Grammar dispatch for parsing and quoting command lines
"""
import enum
import sys
from typing import List, Optional, Sequence, Union
from loguru import logger

from cmdquote.posix import parse_posix, quote_posix
from cmdquote.windows import parse_windows, quote_windows


class Platform(str, enum.Enum):
    """Command line grammar enumeration"""
    POSIX = "posix"  # sh/bash style quoting
    WINDOWS = "windows"  # CommandLineToArgvW style quoting


PlatformLike = Union[Platform, str]


def detect_platform() -> Platform:
    """Return the grammar used by the host operating system"""
    if sys.platform == "win32":
        return Platform.WINDOWS
    return Platform.POSIX


def parse(platform: PlatformLike, command_line: str) -> List[str]:
    """
    Split a command line into arguments using the given grammar

    Args:
        platform: Platform.POSIX / Platform.WINDOWS or their string values
        command_line: The command line to parse

    Returns:
        List of arguments
    """
    platform = Platform(platform)
    if platform is Platform.WINDOWS:
        args = parse_windows(command_line)
    else:
        args = parse_posix(command_line)
    logger.debug(f"Parsed {len(args)} arguments with {platform.value} grammar")
    return args


def quote(platform: PlatformLike, arguments: Sequence[str]) -> str:
    """
    Join arguments into a single command line using the given grammar

    Args:
        platform: Platform.POSIX / Platform.WINDOWS or their string values
        arguments: The arguments to quote, an empty sequence gives ""

    Returns:
        The quoted command line
    """
    if arguments is None:
        raise TypeError("arguments must be a sequence of strings, not None")
    if isinstance(arguments, str):
        raise TypeError("arguments must be a sequence of strings, not a single str")
    arguments = list(arguments)
    platform = Platform(platform)
    if platform is Platform.WINDOWS:
        command_line = quote_windows(arguments)
    else:
        command_line = quote_posix(arguments)
    logger.debug(f"Quoted {len(arguments)} arguments with {platform.value} grammar")
    return command_line


def format_command_for_display(command: Sequence[str], platform: Optional[PlatformLike] = None) -> str:
    """
    Format a command array for display to the user

    Args:
        command: List of command parts (command and arguments)
        platform: Grammar to quote with, defaults to the host grammar

    Returns:
        A formatted string representation of the command
    """
    # Handle empty command
    if not command:
        return ""

    # If the command is already a string, just return it
    if isinstance(command, str):
        return command

    return quote(platform or detect_platform(), command)


def parse_command(command_str: str, platform: Optional[PlatformLike] = None) -> List[str]:
    """
    Parse a command string into a list of command parts

    Args:
        command_str: The command string to parse
        platform: Grammar to parse with, defaults to the host grammar

    Returns:
        List of command parts
    """
    return parse(platform or detect_platform(), command_str)
