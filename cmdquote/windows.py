# -*- coding: utf-8 -*-
"""
@author:XuMing(xuming624@qq.com)
@description: Windows command line parsing and quoting, following the
CommandLineToArgvW rules for backslashes and double quotes.

See https://learn.microsoft.com/en-us/cpp/c-language/parsing-c-command-line-arguments
"""
import enum
import re
from typing import List, Sequence

WHITESPACE = " \t"
# Characters that force an argument to be escaped
SPECIAL_CHARS = "\"' \\\t"


class ParseState(enum.Enum):
    """Scanner state for the Windows grammar"""
    BASE = 0  # Between arguments
    NORMAL = 1  # Unquoted content
    DOUBLE = 2  # Inside "..."


def parse_windows(command_line: str) -> List[str]:
    """
    Split a command line into arguments following Windows quoting rules

    Backslashes are literal unless they directly precede a double quote. A run
    of 2n backslashes before a quote yields n backslashes and the quote toggles
    quoting, a run of 2n+1 yields n backslashes and a literal quote.

    Args:
        command_line: The command line to parse

    Returns:
        List of arguments
    """
    results: List[str] = []
    current: List[str] = []
    quoted = False
    state = ParseState.BASE
    escape_count = 0

    for char in command_line:
        if char == "\\":
            if state is ParseState.BASE:
                state = ParseState.NORMAL
            escape_count += 1
            continue

        if char == '"':
            current.append("\\" * (escape_count // 2))
            if escape_count % 2:
                current.append('"')
            else:
                state = ParseState.NORMAL if state is ParseState.DOUBLE else ParseState.DOUBLE
                quoted = True
            escape_count = 0
            continue

        if escape_count:
            current.append("\\" * escape_count)
            escape_count = 0

        if char in WHITESPACE:
            if state is ParseState.NORMAL:
                # Found the end of the argument
                text = "".join(current)
                if text or quoted:
                    results.append(text)
                current = []
                quoted = False
                state = ParseState.BASE
            elif state is ParseState.DOUBLE:
                current.append(char)
            continue

        if state is ParseState.BASE:
            state = ParseState.NORMAL
        current.append(char)

    if state is not ParseState.BASE:
        current.append("\\" * escape_count)
        text = "".join(current)
        if text or quoted:
            results.append(text)

    return results


def _escape_quote(match: re.Match) -> str:
    return "\\" * (len(match.group(1)) * 2 + 1) + '"'


def quote_windows_arg(arg: str) -> str:
    """Quote a single argument for CommandLineToArgvW, only when needed"""
    if not arg:
        return '""'

    if not any(c in SPECIAL_CHARS for c in arg):
        return arg

    escaped = re.sub(r'(\\*)"', _escape_quote, arg)

    if " " in escaped or "\t" in escaped:
        # Trailing backslashes would otherwise escape the closing quote
        escaped = re.sub(r"(\\+)\Z", r"\1\1", escaped)
        return f'"{escaped}"'
    return escaped


def quote_windows(arguments: Sequence[str]) -> str:
    """
    Join arguments into a command line following Windows quoting rules

    Args:
        arguments: The arguments to join

    Returns:
        The quoted command line
    """
    return " ".join(quote_windows_arg(arg) for arg in arguments)
