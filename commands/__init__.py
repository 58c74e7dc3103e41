"""
nginx-allowlist CLI Commands

This module contains CLI command implementations for the nginx-allowlist tool.
"""

__all__ = ["allowlist"]

from commands.allowlist import allowlist
