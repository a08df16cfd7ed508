"""
The SIP002 URI format, which only base64-encodes the user info:

    ss://base64(method:password)@host:port/[?plugin=...][#tag]

Ref: https://shadowsocks.org/en/spec/SIP002-URI-Scheme.html
"""

from __future__ import annotations

import urllib.parse
from dataclasses import dataclass

from shadowsocks_config.config import Config
from shadowsocks_config.exceptions import InvalidURI
from shadowsocks_config.fields import Host
from shadowsocks_config.fields import Method
from shadowsocks_config.fields import Password
from shadowsocks_config.fields import Plugin
from shadowsocks_config.fields import Port
from shadowsocks_config.net import url
from shadowsocks_config.uri import base
from shadowsocks_config.utils import strutils

PLUGIN_PARAM = "plugin"


@dataclass(frozen=True)
class Sip002URI(base.ShadowsocksURI):
    plugin: Plugin | None = None
    """The plugin to announce. If None, `config.extra["plugin"]` is used if present."""

    def __post_init__(self) -> None:
        plugin = self.plugin
        if plugin is None:
            plugin = self.config.extra.get(PLUGIN_PARAM)
        if plugin is not None:
            plugin = Plugin.validate(plugin)
            if not plugin.data:
                plugin = None
        object.__setattr__(self, "plugin", plugin)

    def __str__(self) -> str:
        c = self.config
        # "/" would end the authority, use the URL-safe alphabet.
        user_info = strutils.b64encode(f"{c.method}:{c.password}", urlsafe=True)
        authority = url.hostport(c.host.data, c.port.data, is_ipv6=c.host.is_ipv6)
        return f"{base.PREFIX}{user_info}@{authority}/{self.query}{base.encode_tag_fragment(c.tag)}"

    @property
    def query(self) -> str:
        """The query string including the leading "?", or an empty string."""
        params = [
            (key, value)
            for key, value in self.config.extra.items()
            if key != PLUGIN_PARAM
        ]
        if self.plugin is not None:
            params.insert(0, (PLUGIN_PARAM, self.plugin.data))
        if not params:
            return ""
        return f"?{url.encode(params)}"

    @classmethod
    def stringify(cls, config: Config, plugin: Plugin | str | None = None) -> str:
        return str(cls(config, plugin))

    @classmethod
    def parse(cls, uri: str) -> Config:
        base.validate_protocol(uri)
        # "ss" is structurally a scheme, replace it so that urllib treats the rest as a network location.
        try:
            parts = urllib.parse.urlsplit(f"http{uri[len('ss'):]}")
            user_info, host_str, port_str = url.split_authority(parts.netloc)
        except ValueError as e:
            raise InvalidURI(f"Invalid URI: {uri}") from e

        host = Host(host_str)
        port = Port(port_str or "")
        tag = base.decode_tag_fragment(parts.fragment)

        # Restore percent-encoded padding ("%3D") before decoding.
        b64_user_info = user_info or ""
        try:
            user_info = strutils.b64decode(url.unquote(b64_user_info))
        except ValueError as e:
            raise InvalidURI(f"Invalid base64 user info: {b64_user_info}") from e
        method_str, colon, password_str = user_info.partition(":")
        if not colon:
            raise InvalidURI(f"Missing password part: {user_info}")
        method = Method(method_str)
        password = Password(password_str)

        try:
            params = url.decode(parts.query)
        except ValueError as e:
            raise InvalidURI(f"Invalid query string: {parts.query}") from e
        extra: dict[str, str] = {}
        for key, value in params:
            if key == PLUGIN_PARAM:
                if not value:
                    continue
                value = Plugin(value).data
            extra.setdefault(key, value)

        return Config(
            host=host, port=port, method=method, password=password, tag=tag, extra=extra
        )
