"""Custom exceptions for numkit."""

from __future__ import annotations


class NumkitError(Exception):
    """Base exception for numkit."""


class InvalidArgumentError(NumkitError, ValueError):
    """Arguments describe a range with no value left to draw."""


class ConfigError(NumkitError):
    """Invalid configuration."""
