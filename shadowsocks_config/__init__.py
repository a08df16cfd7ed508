from shadowsocks_config.config import Config
from shadowsocks_config.config import make_config
from shadowsocks_config.exceptions import InvalidConfigField
from shadowsocks_config.exceptions import InvalidURI
from shadowsocks_config.exceptions import ShadowsocksConfigError
from shadowsocks_config.fields import Host
from shadowsocks_config.fields import Method
from shadowsocks_config.fields import Password
from shadowsocks_config.fields import Plugin
from shadowsocks_config.fields import Port
from shadowsocks_config.fields import Tag
from shadowsocks_config.uri import LegacyBase64URI
from shadowsocks_config.uri import PROTOCOL
from shadowsocks_config.uri import Sip002URI
from shadowsocks_config.uri import parse
from shadowsocks_config.version import VERSION

__version__ = VERSION

__all__ = [
    "Config",
    "make_config",
    "InvalidConfigField",
    "InvalidURI",
    "ShadowsocksConfigError",
    "Host",
    "Method",
    "Password",
    "Plugin",
    "Port",
    "Tag",
    "LegacyBase64URI",
    "PROTOCOL",
    "Sip002URI",
    "parse",
]
