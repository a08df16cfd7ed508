import base64
import binascii
from typing import overload

_urlsafe_to_standard = bytes.maketrans(b"-_", b"+/")


@overload
def always_bytes(str_or_bytes: None, *encode_args) -> None: ...


@overload
def always_bytes(str_or_bytes: str | bytes, *encode_args) -> bytes: ...


def always_bytes(str_or_bytes: None | str | bytes, *encode_args) -> None | bytes:
    if str_or_bytes is None or isinstance(str_or_bytes, bytes):
        return str_or_bytes
    elif isinstance(str_or_bytes, str):
        return str_or_bytes.encode(*encode_args)
    else:
        raise TypeError(
            f"Expected str or bytes, but got {type(str_or_bytes).__name__}."
        )


def b64encode(text: str, padding: bool = True, urlsafe: bool = False) -> str:
    """
    Base64-encodes the UTF-8 representation of text.

    Args:
        padding: If False, trailing "=" characters are stripped.
        urlsafe: If True, "-" and "_" are used instead of "+" and "/".
    """
    data = always_bytes(text, "utf-8")
    if urlsafe:
        encoded = base64.urlsafe_b64encode(data).decode("ascii")
    else:
        encoded = base64.b64encode(data).decode("ascii")
    if not padding:
        encoded = encoded.rstrip("=")
    return encoded


def b64decode(data: str | bytes) -> str:
    """
    Decodes base64 into text. Both the standard and the URL-safe alphabet are
    accepted, padding is optional.

    Raises:
        ValueError, if the input is not valid base64 or does not decode to UTF-8.
    """
    try:
        data_bytes = always_bytes(data, "ascii")
    except UnicodeEncodeError:
        raise ValueError("base64 data must be ascii")
    data_bytes = data_bytes.rstrip(b"=").translate(_urlsafe_to_standard)
    data_bytes += b"=" * (-len(data_bytes) % 4)
    try:
        decoded = base64.b64decode(data_bytes, validate=True)
    except binascii.Error as e:
        raise ValueError(f"invalid base64: {e}") from e
    # UnicodeDecodeError is a subclass of ValueError.
    return decoded.decode("utf-8")
