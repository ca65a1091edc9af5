"""
Parser configuration for astsketch.

Settings can be passed explicitly or picked up from environment variables;
explicit arguments win over the environment, which wins over defaults.
"""

import os
from typing import Optional, Sequence, Tuple


def _env_flag(name: str) -> Optional[bool]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip().lower() in ("1", "true", "yes", "on")


class ParserConfig:
    """Configuration for tree assembly."""

    DEFAULT_DIALECT = "expression"
    DEFAULT_COMMENT_PREFIXES = ("//", "#")

    def __init__(
        self,
        default_dialect: Optional[str] = None,
        comment_prefixes: Optional[Sequence[str]] = None,
        strict_dialects: Optional[bool] = None,
    ):
        """
        Initialize parser configuration.

        Args:
            default_dialect: Dialect used when a caller's dialect name is
                            unknown. If None, uses ASTSKETCH_DIALECT or default.
            comment_prefixes: Line prefixes that mark comment lines. If None,
                             uses comma-separated ASTSKETCH_COMMENT_PREFIXES
                             or default.
            strict_dialects: Raise on unknown dialect names instead of falling
                            back. If None, uses ASTSKETCH_STRICT_DIALECTS.
        """
        self.default_dialect = (
            default_dialect
            or os.getenv("ASTSKETCH_DIALECT")
            or self.DEFAULT_DIALECT
        )

        if comment_prefixes is not None:
            self.comment_prefixes: Tuple[str, ...] = tuple(comment_prefixes)
        elif os.getenv("ASTSKETCH_COMMENT_PREFIXES"):
            self.comment_prefixes = tuple(
                prefix.strip()
                for prefix in os.getenv("ASTSKETCH_COMMENT_PREFIXES").split(",")
                if prefix.strip()
            )
        else:
            self.comment_prefixes = self.DEFAULT_COMMENT_PREFIXES

        if strict_dialects is not None:
            self.strict_dialects = strict_dialects
        else:
            self.strict_dialects = bool(_env_flag("ASTSKETCH_STRICT_DIALECTS"))

    def __repr__(self) -> str:
        return (
            f"ParserConfig(default_dialect='{self.default_dialect}', "
            f"comment_prefixes={self.comment_prefixes!r}, "
            f"strict_dialects={self.strict_dialects})"
        )

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """Create config from environment variables only."""
        return cls()

    def is_comment(self, line: str) -> bool:
        """Check if a stripped line is a comment line."""
        return line.startswith(self.comment_prefixes)


# Global default config instance (can be overridden)
DEFAULT_PARSER_CONFIG = ParserConfig()


def get_parser_config(
    default_dialect: Optional[str] = None,
    comment_prefixes: Optional[Sequence[str]] = None,
    strict_dialects: Optional[bool] = None,
) -> ParserConfig:
    """
    Get parser configuration.

    If no parameters provided, returns the global default config.
    Otherwise, creates a new config with the specified parameters.
    """
    if default_dialect is None and comment_prefixes is None and strict_dialects is None:
        return DEFAULT_PARSER_CONFIG
    return ParserConfig(default_dialect, comment_prefixes, strict_dialects)
