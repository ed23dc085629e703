# -*- coding: utf-8 -*-
"""
@author:XuMing(xuming624@qq.com)
@description:
"""
import os
import json
from dataclasses import dataclass
from typing import Optional
from loguru import logger

from cmdquote.version import __version__

ROOT_DIR = os.getenv("CMDQUOTE_HOME", os.path.expanduser("~/.cmdquote/"))
# Constants
DEFAULT_CONFIG_FILE = os.path.join(ROOT_DIR, "config.json")
DEFAULT_LOG_LEVEL = "WARNING"
PLATFORM_CHOICES = ("posix", "windows")
OUTPUT_FORMATS = ("lines", "json")
CLI_VERSION = __version__


@dataclass
class AppConfig:
    """Configuration for the library and the CLI"""
    platform: Optional[str] = None  # None means detect from the host
    log_level: str = DEFAULT_LOG_LEVEL
    output_format: str = "lines"

    def __post_init__(self):
        if self.platform is not None:
            self.platform = str(self.platform).lower()
            if self.platform not in PLATFORM_CHOICES:
                logger.warning(f"Unknown platform {self.platform!r}, falling back to host detection")
                self.platform = None
        if self.output_format not in OUTPUT_FORMATS:
            logger.warning(f"Unknown output format {self.output_format!r}, using 'lines'")
            self.output_format = "lines"
        self.log_level = str(self.log_level).upper()


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Load configuration from a config file and the environment

    Values from the environment (CMDQUOTE_PLATFORM, CMDQUOTE_LOG_LEVEL)
    override values from the file.

    Args:
        config_path: Path to the configuration file (JSON), defaults to ~/.cmdquote/config.json

    Returns:
        AppConfig instance with loaded or default configuration
    """
    config_data = {}

    config_path = config_path or DEFAULT_CONFIG_FILE
    if os.path.exists(config_path):
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = json.load(f)
            if not isinstance(config_data, dict):
                logger.error(f"Config file {config_path} must contain a JSON object")
                config_data = {}
        except Exception as e:
            logger.error(f"Error loading config file: {str(e)}")
            config_data = {}

    platform = os.environ.get("CMDQUOTE_PLATFORM") or config_data.get("platform")
    log_level = os.environ.get("CMDQUOTE_LOG_LEVEL") or config_data.get("log_level", DEFAULT_LOG_LEVEL)
    output_format = config_data.get("output_format", "lines")

    return AppConfig(platform=platform, log_level=log_level, output_format=output_format)
