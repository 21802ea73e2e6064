import base64

import pytest
from hypothesis import given, strategies as st

from jwkdemo.codec import (
    b64url_decode,
    b64url_encode,
    b64url_to_int,
    bytes_to_text,
    int_to_b64url,
    text_to_bytes,
)
from jwkdemo.errors import DataError


@given(st.binary(max_size=512))
def test_base64_roundtrip(data):
    assert text_to_bytes(bytes_to_text(data)) == data


def test_bytes_to_text_is_standard_base64():
    # standard alphabet with padding, never the url-safe one
    assert bytes_to_text(b"\xfb\xff") == "+/8="
    assert bytes_to_text(b"") == ""


@pytest.mark.parametrize("bad", ["not base64!", "-_8=", "abc", "Zm9v\n"])
def test_text_to_bytes_rejects_malformed(bad):
    with pytest.raises(DataError):
        text_to_bytes(bad)


def test_text_to_bytes_rejects_non_ascii():
    with pytest.raises(DataError):
        text_to_bytes("Zm9vé===")


def test_b64url_unpadded():
    assert b64url_encode(b"\xfb\xff") == "-_8"
    assert b64url_decode("-_8") == b"\xfb\xff"
    with pytest.raises(DataError):
        b64url_decode("+/8=")


def test_int_members():
    assert int_to_b64url(65537) == "AQAB"
    assert b64url_to_int("AQAB") == 65537
    # fixed width keeps leading zero octets (EC coordinates)
    raw = b64url_decode(int_to_b64url(1, 32))
    assert len(raw) == 32 and raw[-1] == 1
    assert int_to_b64url(0) == b64url_encode(b"\x00")


def test_int_member_empty_rejected():
    with pytest.raises(DataError):
        b64url_to_int("")


def test_b64url_matches_stdlib():
    data = bytes(range(200))
    assert b64url_decode(b64url_encode(data)) == data
    assert b64url_encode(data) == base64.urlsafe_b64encode(data).rstrip(b"=").decode()
