# -*- coding: utf-8 -*-
"""
@author:XuMing(xuming624@qq.com)
@description: Parse and quote command lines with POSIX shell or Windows rules
"""
from loguru import logger

from cmdquote.version import __version__
from cmdquote.posix import parse_posix, quote_posix
from cmdquote.windows import parse_windows, quote_windows
from cmdquote.format_command import (
    Platform,
    detect_platform,
    parse,
    quote,
    parse_command,
    format_command_for_display,
)

__all__ = [
    "__version__",
    "Platform",
    "detect_platform",
    "parse",
    "quote",
    "parse_command",
    "format_command_for_display",
    "parse_posix",
    "quote_posix",
    "parse_windows",
    "quote_windows",
]

# Library code stays silent unless the application opts in
logger.disable("cmdquote")
