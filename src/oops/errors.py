"""Exception types shared across Oops."""

from __future__ import annotations


class OopsError(Exception):
    """Base class for Oops errors."""


class RegistryIntrospectionError(OopsError):
    """The host's command table could not be read or modified."""


class ConfigError(OopsError):
    """Configuration could not be turned into usable settings."""
