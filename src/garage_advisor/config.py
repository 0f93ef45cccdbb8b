# File: src/garage_advisor/config.py
"""
Application configuration
"""

from datetime import datetime
from enum import Enum


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


class AppConfig:
    """Application configuration"""
    APP_NAME = "Garage Advisor"
    VERSION = "1.0.0"

    # Logging
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    LOG_DIR = "logs"
    LOG_FILE = "garage_advisor.log"
    DEFAULT_LOG_LEVEL = "WARNING"

    # Output
    DEFAULT_OUTPUT_FORMAT = OutputFormat.TEXT
    JSON_INDENT = 2

    # Sample request used when the CLI gets no arguments
    SAMPLE_ENTRY_TIME = datetime(2013, 1, 18, 1, 30)
    SAMPLE_MODEL = "pirate"
    SAMPLE_MAKE_YEAR = 1902
