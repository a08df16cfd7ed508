"""
Every exception raised by this package on bad input is a subclass of
ShadowsocksConfigError, so callers can catch a single type:

- InvalidConfigField is raised when a single configuration value fails validation.
- InvalidURI is raised when a string cannot be parsed as a Shadowsocks URI.

Errors from the standard library (binascii, urllib, the idna codec) are never
propagated directly, they are translated and chained with `raise ... from`.
"""


class ShadowsocksConfigError(Exception):
    """
    Base class for all exceptions thrown by shadowsocks_config.
    """

    def __init__(self, message=None):
        super().__init__(message)


class InvalidConfigField(ShadowsocksConfigError):
    """
    A configuration field did not validate.
    """

    def __init__(self, field: str, value):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}: {value}")


class InvalidURI(ShadowsocksConfigError):
    pass
