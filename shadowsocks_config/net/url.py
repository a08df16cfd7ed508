from __future__ import annotations

import re
import urllib.parse
from collections.abc import Sequence

# Characters that JavaScript's encodeURIComponent leaves alone, on top of
# urllib's always-safe set (letters, digits and "_.-~").
_component_safe = "!*'()"

# This regex splits an authority into user info, host and port.
# Handles the edge case of IPv6 addresses containing colons.
_authority_re = re.compile(
    r"^(?:(?P<userinfo>.*)@)?(?P<host>[^:@\[\]]*|\[[^\]]*\])(?::(?P<port>[^:]*))?$"
)


def quote(s: str) -> str:
    """
    Percent-encodes a URI component, e.g. a fragment or a query value.

    Returns:
        An ascii-encodable str.
    """
    return urllib.parse.quote(s, safe=_component_safe)


def unquote(s: str) -> str:
    """
    Args:
        s: A percent-encoded str
    Raises:
        ValueError, if the decoded bytes are not valid UTF-8.
    """
    return urllib.parse.unquote(s, errors="strict")


def encode(s: Sequence[tuple[str, str]]) -> str:
    """
    Takes a list of (key, value) tuples and returns a query string.
    Spaces are encoded as %20, not as "+".
    """
    return urllib.parse.urlencode(
        s, safe=_component_safe, quote_via=urllib.parse.quote
    )


def decode(s: str) -> list[tuple[str, str]]:
    """
    Takes a query string and returns a list of (key, value) tuples.

    Raises:
        ValueError, if the decoded bytes are not valid UTF-8.
    """
    return urllib.parse.parse_qsl(s, keep_blank_values=True, errors="strict")


def split_authority(authority: str) -> tuple[str | None, str, str | None]:
    """
    Splits an authority such as "user@[::1]:8388" into (userinfo, host, port).
    IPv6 brackets are removed from the host. Missing parts are None.

    Raises:
        ValueError, if the authority is not properly formatted.
    """
    m = _authority_re.match(authority)
    if not m:
        raise ValueError(f"Invalid authority: {authority}")
    host = m.group("host")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return m.group("userinfo"), host, m.group("port")


def hostport(host: str, port: int | str, is_ipv6: bool = False) -> str:
    """
    Returns the host and port joined for use in a URI, bracketing IPv6 addresses.
    """
    if is_ipv6:
        return f"[{host}]:{port}"
    return f"{host}:{port}"
