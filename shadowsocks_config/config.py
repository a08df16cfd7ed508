from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from typing import Any

from shadowsocks_config.coretypes.serializable import Serializable
from shadowsocks_config.exceptions import InvalidConfigField
from shadowsocks_config.fields import Host
from shadowsocks_config.fields import Method
from shadowsocks_config.fields import Password
from shadowsocks_config.fields import Port
from shadowsocks_config.fields import Tag


@dataclass(frozen=True)
class Config(Serializable):
    """
    A validated Shadowsocks server configuration.

    Raw values passed to the constructor are validated in field order (host, port, method,
    password, tag), the first invalid one raises `InvalidConfigField`. Instances are immutable,
    use `Config.replace` to obtain a modified copy.
    """

    host: Host
    port: Port
    method: Method
    password: Password = field(default=Password(), repr=False)
    tag: Tag = Tag()
    extra: dict[str, str] = field(default_factory=dict, hash=False)
    """Query parameters found while parsing a SIP002 URI, in their original order."""

    def __post_init__(self) -> None:
        for f in (Host, Port, Method, Password, Tag):
            name = f.field_name
            object.__setattr__(self, name, f.validate(getattr(self, name)))

        extra = self.extra
        if not isinstance(extra, Mapping):
            raise InvalidConfigField("extra", extra)
        for key, value in extra.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise InvalidConfigField("extra", f"{key!r}={value!r}")
        object.__setattr__(self, "extra", dict(extra))

    def replace(self, **changes: Any) -> Config:
        """
        Return a new config with the given fields replaced. New values are validated
        the same way as on construction.
        """
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_state(cls, state) -> Config:
        return cls(
            host=state.get("host"),
            port=state.get("port"),
            method=state.get("method"),
            password=state.get("password"),
            tag=state.get("tag"),
            extra=state.get("extra") or {},
        )

    def get_state(self):
        return {
            "host": self.host.data,
            "port": self.port.data,
            "method": self.method.data,
            "password": self.password.data,
            "tag": self.tag.data,
            "extra": dict(self.extra),
        }

    def set_state(self, state):
        if state != self.get_state():
            raise dataclasses.FrozenInstanceError("Configs are immutable.")


def make_config(fields: Mapping[str, Any]) -> Config:
    """
    Build a `Config` from a mapping of raw values, e.g.

        make_config({"host": "192.168.100.1", "port": 8388, "method": "chacha20"})

    `host`, `port` and `method` are required, `password` and `tag` default to an empty string.
    Other keys are ignored.

    *Raises:*
     - InvalidConfigField, for the first missing or invalid field.
    """
    return Config(
        host=fields.get("host"),
        port=fields.get("port"),
        method=fields.get("method"),
        password=fields.get("password"),
        tag=fields.get("tag"),
    )
