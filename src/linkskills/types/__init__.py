"""Shared type aliases for linkskills."""

from .common import AgentId, LinkStatus

__all__ = ["AgentId", "LinkStatus"]
