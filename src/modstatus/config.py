"""Configuration handling for the mod_status parser."""

import logging
import os
from dataclasses import dataclass


@dataclass
class ParserConfig:
    """Configuration for scoreboard parsing.

    Configuration can be loaded from:
    1. Environment variables (MODSTATUS_HTML_PARSER, MODSTATUS_STRICT_HEADERS,
       MODSTATUS_LOG_LEVEL)
    2. Explicit parameters

    Header matching is lenient by default: a header row shorter than the
    reference layout passes when every cell it does have matches.
    """

    html_parser: str = "lxml"
    strict_headers: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """Load configuration from environment variables.

        Environment variables:
            MODSTATUS_HTML_PARSER: BeautifulSoup tree builder (default "lxml")
            MODSTATUS_STRICT_HEADERS: Set to "true" for exact header matching
            MODSTATUS_LOG_LEVEL: Logging level name (default "WARNING")

        Returns:
            ParserConfig instance
        """
        return cls(
            html_parser=os.environ.get("MODSTATUS_HTML_PARSER", "lxml"),
            strict_headers=os.environ.get("MODSTATUS_STRICT_HEADERS", "").lower() == "true",
            log_level=os.environ.get("MODSTATUS_LOG_LEVEL", "WARNING").upper(),
        )

    @property
    def log_level_number(self) -> int:
        """Numeric logging level, WARNING if the name is unknown."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING

    def validate(self) -> list[str]:
        """Validate configuration, returning list of problems.

        Returns:
            List of human-readable problems, empty if valid.
        """
        problems = []
        if not self.html_parser:
            problems.append("html_parser (MODSTATUS_HTML_PARSER) is empty")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            problems.append(f"log_level (MODSTATUS_LOG_LEVEL) is not a logging level: {self.log_level}")
        return problems
