import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from shadowsocks_config.exceptions import InvalidConfigField
from shadowsocks_config.fields import ConfigField
from shadowsocks_config.fields import Host
from shadowsocks_config.fields import METHODS
from shadowsocks_config.fields import Method
from shadowsocks_config.fields import Password
from shadowsocks_config.fields import Plugin
from shadowsocks_config.fields import Port
from shadowsocks_config.fields import Tag


@pytest.mark.parametrize("valid", ["127.0.0.1", "8.8.8.8", "192.168.0.1"])
def test_host_ipv4(valid):
    host = Host(valid)
    assert host.data == valid
    assert host.is_ipv4
    assert not host.is_ipv6
    assert not host.is_hostname


@pytest.mark.parametrize("valid", ["0:0:0:0:0:0:0:1", "2001:0:ce49:7601:e866:efff:62c3:fffe"])
def test_host_ipv6(valid):
    host = Host(valid)
    assert host.data == valid
    assert not host.is_ipv4
    assert host.is_ipv6
    assert not host.is_hostname
    assert Host(f"[{valid}]") == host


@pytest.mark.parametrize("valid", ["localhost", "example.com"])
def test_host_hostname(valid):
    host = Host(valid)
    assert host.data == valid
    assert not host.is_ipv4
    assert not host.is_ipv6
    assert host.is_hostname


@pytest.mark.parametrize(
    "host,converted",
    [
        ("mañana.com", "xn--maana-pta.com"),
        ("☃-⌘.com", "xn----dqo34k.com"),
    ],
)
def test_host_punycode(host, converted):
    h = Host(host)
    assert h.data == converted
    assert not h.is_ipv4
    assert not h.is_ipv6
    assert h.is_hostname


@pytest.mark.parametrize("invalid", ["", "-", "-pwned", ";echo pwned", ".", "....", None, 42])
def test_host_invalid(invalid):
    with pytest.raises(InvalidConfigField, match="Invalid host") as excinfo:
        Host(invalid)
    assert excinfo.value.field == "host"
    assert excinfo.value.value == invalid


def test_host_immutable():
    host = Host("example.com")
    with pytest.raises(dataclasses.FrozenInstanceError):
        host.data = "example.org"  # type: ignore
    assert repr(host) == "Host('example.com')"
    assert str(host) == "example.com"


@pytest.mark.parametrize("valid,out", [("8388", 8388), ("443", 443), (8388, 8388), (443, 443), ("0", 0)])
def test_port(valid, out):
    port = Port(valid)
    assert port.data == str(out)
    assert int(port) == out


def test_port_normalize():
    assert Port("01234").data == "1234"
    assert int(Port("01234")) == 1234
    assert Port("01234") == Port(1234)


@pytest.mark.parametrize(
    "invalid", ["", "foo", "-123", "123.4", " 123", "٣", "9" * 5000, -123, 123.4, 65536, True, None]
)
def test_port_invalid(invalid):
    with pytest.raises(InvalidConfigField, match="Invalid port"):
        Port(invalid)


@pytest.mark.parametrize("method", sorted(METHODS))
def test_method(method):
    assert Method(method).data == method


def test_method_list():
    assert len(METHODS) == 18
    assert "chacha20-ietf-poly1305" in METHODS


@pytest.mark.parametrize("invalid", ["", "foo", "AES-128-GCM", " rc4-md5", None])
def test_method_invalid(invalid):
    with pytest.raises(InvalidConfigField, match="Invalid method"):
        Method(invalid)


@pytest.mark.parametrize("cls", [Password, Tag, Plugin])
def test_text_fields(cls):
    assert cls().data == ""
    assert cls(None).data == ""
    assert cls("").data == ""
    assert cls("P@$$W0RD!").data == "P@$$W0RD!"
    with pytest.raises(InvalidConfigField):
        cls(42)


def test_field_types_differ():
    assert Password("x") != Tag("x")
    assert Tag("x") == Tag("x")
    assert hash(Tag("x")) == hash(Tag("x"))


def test_field_names():
    assert Host.field_name == "host"
    assert Port.field_name == "port"
    assert Plugin.field_name == "plugin"


def test_config_field_is_abstract():
    with pytest.raises(TypeError):
        ConfigField("foo")  # type: ignore


def test_validate():
    port = Port("8388")
    assert Port.validate(port) is port
    assert Port.validate("08388") == port
    assert Tag.validate(None) == Tag("")
    with pytest.raises(InvalidConfigField):
        Method.validate("foo")


@pytest.mark.parametrize(
    "cls,raw",
    [
        (Host, "Example.COM"),
        (Host, "[::1]"),
        (Host, "mañana.com"),
        (Port, "00080"),
        (Port, 80),
        (Method, "aes-256-gcm"),
        (Password, None),
        (Tag, "Foo Bar"),
    ],
)
def test_validate_idempotent(cls, raw):
    field = cls.validate(raw)
    assert cls.validate(field.data) == field


@given(st.ip_addresses())
def test_host_ip_roundtrip(address):
    host = Host(str(address))
    assert Host(host.data) == host
    assert host.is_ipv4 == (address.version == 4)
    assert host.is_ipv6 == (address.version == 6)
    assert not host.is_hostname


@given(st.integers(min_value=0, max_value=65535))
def test_port_roundtrip(number):
    assert int(Port(number)) == number
    assert Port(str(number)) == Port(number)
