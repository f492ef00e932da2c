"""Constants for stdout formatting."""

from __future__ import annotations

ANSI_GREEN: str = "\033[0;32m"
ANSI_YELLOW: str = "\033[1;33m"
ANSI_RED: str = "\033[0;31m"
ANSI_BLUE: str = "\033[0;34m"
ANSI_RESET: str = "\033[0m"

NO_COLOR_ENV: str = "NO_COLOR"

SYMBOL_OK: str = "✓"
SYMBOL_WARN: str = "⚠"
SYMBOL_FAIL: str = "✗"

BANNER_RULE: str = "=" * 42
SUMMARY_RULE: str = "=" * 34
