"""Errors raised by the allowlist pipeline steps."""


class AllowlistError(Exception):
    """Base class for all pipeline step failures."""


class NetworkError(AllowlistError):
    """A provider could not be reached or answered with an error status."""


class DecodeError(AllowlistError):
    """A structured provider response could not be decoded."""


class WriteError(AllowlistError):
    """The rendered allowlist could not be written to disk."""


class ReloadError(AllowlistError):
    """The reverse proxy reload command could not be started or failed."""
