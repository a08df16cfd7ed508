"""
This module contains the self-validating, normalizing value types that make up
a Shadowsocks configuration. Each type validates its input on construction and
raises `InvalidConfigField` instead of producing an invalid instance.
Examples:

    assert Port("01234").data == "1234"
    assert Host("mañana.com").data == "xn--maana-pta.com"
    assert Host("::1").is_ipv6
    assert Tag().data == ""

    Port("123.4")  # InvalidConfigField
    Method("foo")  # InvalidConfigField

"""

from __future__ import annotations

import sys
from abc import ABCMeta
from abc import abstractmethod
from dataclasses import dataclass
from typing import Any
from typing import ClassVar

from shadowsocks_config.exceptions import InvalidConfigField
from shadowsocks_config.net import check

if sys.version_info < (3, 11):
    from typing_extensions import Self  # pragma: no cover
else:
    from typing import Self


@dataclass(frozen=True)  # type: ignore
class ConfigField(metaclass=ABCMeta):
    """
    A single, already validated configuration value.
    Subclassed for each field, which then does its own validation.
    """

    data: str = ""
    """The normalized value."""

    field_name: ClassVar[str]  # automatically derived from the class name in __init_subclass__
    """The name used in error messages, e.g. "host" or "port"."""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.field_name = cls.__name__.lower()

    def __repr__(self):
        return f"{type(self).__name__}({self.data!r})"

    def __str__(self):
        return self.data

    @abstractmethod
    def __post_init__(self) -> None:
        """Validation and normalization of data happens here."""

    @classmethod
    def validate(cls, raw: Any) -> Self:
        """
        Return `raw` if it already is an instance of this field type, or a new validated instance.

        *Raises:*
         - InvalidConfigField, if `raw` is not a valid value for this field.
        """
        if isinstance(raw, cls):
            return raw
        return cls(raw)

    def _normalized(self, value: str) -> None:
        object.__setattr__(self, "data", value)


class Host(ConfigField):
    """
    An IPv4 address, an IPv6 address (without brackets), or a hostname.
    Internationalized hostnames are converted to punycode.
    """

    kind: check.HostKind

    def __post_init__(self) -> None:
        try:
            host, kind = check.normalize_host(self.data)
        except ValueError as e:
            raise InvalidConfigField(self.field_name, self.data) from e
        self._normalized(host)
        object.__setattr__(self, "kind", kind)

    @property
    def is_ipv4(self) -> bool:
        return self.kind == check.IPV4

    @property
    def is_ipv6(self) -> bool:
        return self.kind == check.IPV6

    @property
    def is_hostname(self) -> bool:
        return self.kind == check.HOSTNAME


class Port(ConfigField):
    """
    A port number in [0, 65535], stored as its decimal string without leading zeros.
    Both `str` and `int` input is accepted.
    """

    def __post_init__(self) -> None:
        raw = self.data
        if isinstance(raw, bool) or not isinstance(raw, (int, str)):
            raise InvalidConfigField(self.field_name, raw)
        if isinstance(raw, str):
            if not (raw.isascii() and raw.isdigit()):
                raise InvalidConfigField(self.field_name, raw)
            try:
                port = int(raw)
            except ValueError as e:  # too many digits
                raise InvalidConfigField(self.field_name, raw) from e
        else:
            port = raw
        if not check.is_valid_port(port):
            raise InvalidConfigField(self.field_name, raw)
        self._normalized(str(port))

    def __int__(self) -> int:
        return int(self.data)


# ref: https://github.com/shadowsocks/shadowsocks-libev/blob/10a2d3e3/completions/bash/ss-redir#L5
METHODS: frozenset[str] = frozenset(
    {
        "rc4-md5",
        "aes-128-gcm",
        "aes-192-gcm",
        "aes-256-gcm",
        "aes-128-cfb",
        "aes-192-cfb",
        "aes-256-cfb",
        "aes-128-ctr",
        "aes-192-ctr",
        "aes-256-ctr",
        "camellia-128-cfb",
        "camellia-192-cfb",
        "camellia-256-cfb",
        "bf-cfb",
        "chacha20-ietf-poly1305",
        "salsa20",
        "chacha20",
        "chacha20-ietf",
    }
)


class Method(ConfigField):
    """A cipher name, which must exactly match one of `METHODS`."""

    def __post_init__(self) -> None:
        if not isinstance(self.data, str) or self.data not in METHODS:
            raise InvalidConfigField(self.field_name, self.data)


class _Text(ConfigField):
    # No validation is performed for free-form text fields.
    # Callers are responsible for sanitizing them when using untrusted input.
    def __post_init__(self) -> None:
        if self.data is None:
            self._normalized("")
        elif not isinstance(self.data, str):
            raise InvalidConfigField(self.field_name, self.data)


class Password(_Text):
    pass


class Tag(_Text):
    """A free-form display label, carried in the URI fragment."""


class Plugin(_Text):
    """A SIP002 plugin specification, e.g. `obfs-local;obfs=http`."""
