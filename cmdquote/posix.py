# -*- coding: utf-8 -*-
"""
@author:XuMing(xuming624@qq.com)
@description: POSIX shell style command line parsing and quoting
"""
import enum
import re
from typing import List, Sequence

WHITESPACE = " \t\n"
# Characters that force an argument to be quoted
SPECIAL_CHARS = "\"' \\()\t\n"
# Characters a backslash can escape inside double quotes
DOUBLE_QUOTE_ESCAPES = "\"\\\n"


class ParseState(enum.Enum):
    """Scanner state for the POSIX grammar"""
    BASE = 0  # Between arguments
    NORMAL = 1  # Unquoted content
    SINGLE = 2  # Inside '...'
    DOUBLE = 3  # Inside "..."


def parse_posix(command_line: str) -> List[str]:
    """
    Split a command line into arguments following POSIX shell quoting rules

    Args:
        command_line: The command line to parse

    Returns:
        List of arguments
    """
    results: List[str] = []
    current: List[str] = []
    quoted = False
    state = ParseState.BASE
    length = len(command_line)
    pos = 0

    while pos < length:
        char = command_line[pos]

        if state is ParseState.BASE:
            if char in WHITESPACE:
                pos += 1
                continue
            # The new argument starts here
            state = ParseState.NORMAL

        if state is ParseState.SINGLE:
            if char == "'":
                state = ParseState.NORMAL
            else:
                current.append(char)
            pos += 1
            continue

        if char == "\\" and pos + 1 < length:
            escaped = command_line[pos + 1]
            if state is ParseState.NORMAL or escaped in DOUBLE_QUOTE_ESCAPES:
                # A newline after the backslash is a continuation and disappears
                if escaped != "\n":
                    current.append(escaped)
                pos += 2
                continue

        if state is ParseState.DOUBLE:
            if char == '"':
                state = ParseState.NORMAL
            else:
                current.append(char)
        elif char in WHITESPACE:
            # Found the end of the argument
            if current or quoted:
                results.append("".join(current))
            current = []
            quoted = False
            state = ParseState.BASE
        elif char == "'":
            state = ParseState.SINGLE
            quoted = True
        elif char == '"':
            state = ParseState.DOUBLE
            quoted = True
        else:
            current.append(char)

        pos += 1

    if state is not ParseState.BASE and (current or quoted):
        results.append("".join(current))

    return results


def quote_posix_arg(arg: str) -> str:
    """Quote a single argument for a POSIX shell, only when needed"""
    if not arg:
        return "''"

    if not any(c in SPECIAL_CHARS for c in arg):
        return arg

    if "'" not in arg:
        return f"'{arg}'"

    # Only double quotes can hold a single quote
    return '"' + re.sub(r'(["\\])', r"\\\1", arg) + '"'


def quote_posix(arguments: Sequence[str]) -> str:
    """
    Join arguments into a command line following POSIX shell quoting rules

    Args:
        arguments: The arguments to join

    Returns:
        The quoted command line
    """
    return " ".join(quote_posix_arg(arg) for arg in arguments)
