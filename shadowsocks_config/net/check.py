import ipaddress
import re
from typing import Literal

HostKind = Literal["ipv4", "ipv6", "hostname"]

IPV4: HostKind = "ipv4"
IPV6: HostKind = "ipv6"
HOSTNAME: HostKind = "hostname"

# Allow underscore in host name, but no hyphen at either end of a label.
_label_valid = re.compile(r"[A-Z\d_](?:[A-Z\d\-_]{0,61}[A-Z\d_])?$", re.IGNORECASE)


def is_ipv4(host: str) -> bool:
    try:
        ipaddress.IPv4Address(host)
    except ValueError:
        return False
    return True


def is_ipv6(host: str) -> bool:
    # Zone ids ("fe80::1%eth0") are meaningless outside the local machine.
    if "%" in host:
        return False
    try:
        ipaddress.IPv6Address(host)
    except ValueError:
        return False
    return True


def normalize_hostname(host: str) -> str:
    """
    IDNA-encodes a DNS hostname and checks the syntax of every label.

    Non-ASCII labels are converted to punycode, the result is lower-cased.

    *Raises:*
     - ValueError, if the hostname is invalid.
    """
    # UnicodeError is a subclass of ValueError.
    host_bytes = host.encode("idna")
    # Reject invalid punycode such as "xn--ke.ws".
    host_bytes.decode("idna")
    # RFC1035: 255 bytes or less.
    if len(host_bytes) > 255:
        raise ValueError(f"hostname too long: {host}")
    hostname = host_bytes.decode("ascii").lower()
    labels = hostname.removesuffix(".").split(".")
    if not all(_label_valid.match(label) for label in labels):
        raise ValueError(f"invalid hostname: {host}")
    # A name ending in a number must be an IPv4 address, e.g. "1.2.3" is not a hostname.
    if labels[-1].isdigit():
        raise ValueError(f"invalid IPv4 address: {host}")
    return hostname


def normalize_host(host: str) -> tuple[str, HostKind]:
    """
    Validates a host and returns its normalized form together with its kind.

    IP addresses are returned as given (IPv6 without brackets), hostnames are
    returned IDNA-encoded, see `normalize_hostname`.

    *Raises:*
     - ValueError, if the host is neither an IPv4 address, an IPv6 address nor a hostname.
    """
    if not isinstance(host, str):
        raise ValueError(f"host must be str, not {type(host).__name__}")
    if not host:
        raise ValueError("empty host")
    if host.startswith("[") and host.endswith("]"):
        if not is_ipv6(host[1:-1]):
            raise ValueError(f"invalid IPv6 address: {host}")
        return host[1:-1], IPV6
    if is_ipv4(host):
        return host, IPV4
    if is_ipv6(host):
        return host, IPV6
    return normalize_hostname(host), HOSTNAME


def is_valid_host(host: str) -> bool:
    """
    Checks if the passed string is a valid DNS hostname or an IPv4/IPv6 address.
    """
    try:
        normalize_host(host)
    except ValueError:
        return False
    return True


def is_valid_port(port: int) -> bool:
    return 0 <= port <= 65535
