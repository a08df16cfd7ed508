"""
The legacy Shadowsocks URI format, which base64-encodes the complete server definition:

    ss://base64(method:password@host:port)[#tag]

Ref: https://shadowsocks.org/en/config/quick-guide.html
"""

from __future__ import annotations

from dataclasses import dataclass

from shadowsocks_config.config import Config
from shadowsocks_config.exceptions import InvalidURI
from shadowsocks_config.fields import Host
from shadowsocks_config.fields import Method
from shadowsocks_config.fields import Password
from shadowsocks_config.fields import Port
from shadowsocks_config.uri import base
from shadowsocks_config.utils import strutils


@dataclass(frozen=True)
class LegacyBase64URI(base.ShadowsocksURI):
    def __str__(self) -> str:
        c = self.config
        # IPv6 addresses are written without brackets.
        data = strutils.b64encode(f"{c.method}:{c.password}@{c.host}:{c.port}", padding=False)
        return f"{base.PREFIX}{data}{base.encode_tag_fragment(c.tag)}"

    @classmethod
    def parse(cls, uri: str) -> Config:
        base.validate_protocol(uri)
        b64_data, _, fragment = uri[len(base.PREFIX):].partition("#")
        tag = base.decode_tag_fragment(fragment)
        try:
            data = strutils.b64decode(b64_data)
        except ValueError as e:
            raise InvalidURI(f"Invalid base64 data: {b64_data}") from e

        method_and_password, at, host_and_port = data.partition("@")
        if not at:
            raise InvalidURI(f'Missing "@": {data}')
        method_str, colon, password_str = method_and_password.partition(":")
        if not colon:
            raise InvalidURI(f"Missing password part: {method_and_password}")
        method = Method(method_str)
        password = Password(password_str)
        # Split at the last colon, so that unbracketed IPv6 addresses work as well.
        host_str, colon, port_str = host_and_port.rpartition(":")
        if not colon:
            raise InvalidURI(f"Missing port part: {host_and_port}")
        host = Host(host_str)
        port = Port(port_str)

        return Config(host=host, port=port, method=method, password=password, tag=tag)
