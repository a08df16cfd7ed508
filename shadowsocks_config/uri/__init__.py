"""
Parsing and rendering of Shadowsocks URIs. Two formats are supported:
`Sip002URI` and `LegacyBase64URI`. Examples:

    config = parse("ss://YWVzLTEyOC1nY206dGVzdA==@192.168.100.1:8888/#Foo%20Bar")
    assert config.method.data == "aes-128-gcm"

    Sip002URI.stringify(config)  # "ss://YWVzLTEyOC1nY206dGVzdA==@192.168.100.1:8888/#Foo%20Bar"
    LegacyBase64URI.stringify(config)  # "ss://YWVzLTEyOC1nY206dGVzdEAxOTIuMTY4LjEwMC4xOjg4ODg#Foo%20Bar"

    parse("not a URI")  # InvalidURI

"""

from __future__ import annotations

import logging

from shadowsocks_config.config import Config
from shadowsocks_config.exceptions import InvalidURI
from shadowsocks_config.uri.base import PREFIX
from shadowsocks_config.uri.base import PROTOCOL
from shadowsocks_config.uri.base import ShadowsocksURI
from shadowsocks_config.uri.legacy import LegacyBase64URI
from shadowsocks_config.uri.sip002 import Sip002URI

logger = logging.getLogger(__name__)

# The first format that parses successfully wins.
URI_TYPES: tuple[type[ShadowsocksURI], ...] = (Sip002URI, LegacyBase64URI)


def parse(uri: str) -> Config:
    """
    Parse a Shadowsocks URI in any supported format.

    *Raises:*
     - InvalidURI, if no format matches. The error of the first attempted format is reported.
    """
    error: Exception | None = None
    for uri_type in URI_TYPES:
        try:
            return uri_type.parse(uri)
        except Exception as e:
            logger.debug(f"Not a {uri_type.type_name} URI: {e}")
            if error is None:
                error = e
    assert error is not None
    if isinstance(error, InvalidURI):
        raise error
    raise InvalidURI(
        f"Invalid input: {uri} - Original error: {type(error).__name__}: {error}"
    ) from error


__all__ = [
    "PREFIX",
    "PROTOCOL",
    "ShadowsocksURI",
    "LegacyBase64URI",
    "Sip002URI",
    "URI_TYPES",
    "parse",
]
