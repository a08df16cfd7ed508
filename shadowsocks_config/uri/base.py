from __future__ import annotations

from abc import ABCMeta
from abc import abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from shadowsocks_config.config import Config
from shadowsocks_config.exceptions import InvalidURI
from shadowsocks_config.fields import Tag
from shadowsocks_config.net import url

PROTOCOL = "ss:"
PREFIX = f"{PROTOCOL}//"


@dataclass(frozen=True)  # type: ignore
class ShadowsocksURI(metaclass=ABCMeta):
    """
    A Shadowsocks URI in one specific format, built from a validated `Config`.
    Subclassed for each wire format, which implements rendering (`__str__`) and parsing.
    """

    config: Config

    type_name: ClassVar[str]  # automatically derived from the class name in __init_subclass__
    """The unique name for this URI format, e.g. "sip002"."""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.type_name = cls.__name__.removesuffix("URI").lower()

    @abstractmethod
    def __str__(self) -> str:
        """Render the URI."""

    @classmethod
    @abstractmethod
    def parse(cls, uri: str) -> Config:
        """
        Parse a URI in this format.

        *Raises:*
         - InvalidURI, if the input does not match the format.
         - InvalidConfigField, if the input matches the format but contains an invalid value.
        """

    @classmethod
    def stringify(cls, config: Config) -> str:
        return str(cls(config))


def validate_protocol(uri: str) -> None:
    if not isinstance(uri, str) or not uri.startswith(PREFIX):
        raise InvalidURI(f'URI must start with "{PREFIX}": {uri}')


def encode_tag_fragment(tag: Tag) -> str:
    if not tag.data:
        return ""
    return f"#{url.quote(tag.data)}"


def decode_tag_fragment(fragment: str) -> Tag:
    try:
        return Tag(url.unquote(fragment))
    except ValueError as e:
        raise InvalidURI(f"Invalid tag: {fragment}") from e
