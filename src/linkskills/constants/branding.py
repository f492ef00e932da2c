"""Branding constants for usage text and terminal output."""

from __future__ import annotations

PROG_NAME: str = "link-skills"
BANNER_TITLE: str = "AI Agent Skills Symlink Setup"
CLI_DESCRIPTION: str = "Symlink skills from a cloned Skills repository into an AI agent's skills directory."
CLI_EPILOG_TEMPLATE: str = """\
If path is not provided, the current directory will be used.

Supported agents:
{agents}

Examples:
  cd ~/Developer/agent/Skills && {prog} claude-code
  {prog} claude-code ~/Developer/agent/Skills
  {prog} codex ~/my/Skills
  cd /path/to/Skills && {prog} cursor"""
