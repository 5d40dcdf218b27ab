"""Tests for Base64Data."""

import base64

import pytest
from pydantic import ValidationError

from apikit import ApiModel, Base64Data, Base64DecodeError


class Attachment(ApiModel):
    content: Base64Data


def test_decode_standard_padded():
    assert Base64Data.decode("aGVsbG8=").data == b"hello"


def test_decode_rejects_garbage():
    with pytest.raises(Base64DecodeError):
        Base64Data.decode("abcdefghij")


def test_decode_accepts_every_dialect():
    """The same payload decodes from each allowed dialect."""
    payload = b"\xfb\xff"
    encodings = [
        "+/8=",  # standard, padded
        "-_8=",  # url-safe, padded
        "-_8",  # url-safe, no padding
        "+/8=\r\n",  # mime
        "+/8",  # standard, no padding
    ]

    for encoded in encodings:
        assert Base64Data.decode(encoded) == Base64Data(payload), encoded


def test_decode_mime_line_wrapped():
    payload = bytes(range(256)) * 2
    wrapped = base64.encodebytes(payload).decode("ascii")
    assert "\n" in wrapped

    assert Base64Data.decode(wrapped).data == payload


def test_decode_invalid_character_names_input():
    with pytest.raises(Base64DecodeError) as exc_info:
        Base64Data.decode("aGVs!G8=")

    assert exc_info.value.value == "aGVs!G8="
    assert "aGVs!G8=" in str(exc_info.value)


def test_decode_rejects_mixed_alphabets():
    with pytest.raises(Base64DecodeError):
        Base64Data.decode("+_8=")


def test_decode_empty_string():
    data = Base64Data.decode("")

    assert data.is_empty()
    assert data == Base64Data()
    assert data.encode() == ""


def test_encode_is_url_safe_without_padding():
    data = Base64Data(bytes(range(256)))
    encoded = data.encode()

    assert "=" not in encoded
    assert "+" not in encoded
    assert "/" not in encoded
    assert str(data) == encoded


def test_round_trip_normalizes_dialect():
    assert str(Base64Data.decode("+/8=")) == "-_8"
    assert str(Base64Data.decode("aGVsbG8=")) == "aGVsbG8"


@pytest.mark.parametrize(
    "payload", [b"", b"a", b"ab", b"abc", b"\x00\xff\x10", bytes(range(256))]
)
def test_round_trip(payload):
    data = Base64Data(payload)
    assert Base64Data.decode(data.encode()) == data


def test_bytes_conversions():
    data = Base64Data(b"binary")

    assert bytes(data) == b"binary"
    assert data.data == b"binary"
    assert len(data) == 6
    assert not data.is_empty()
    assert hash(data) == hash(Base64Data(b"binary"))


def test_model_deserializes_and_serializes_canonically():
    attachment = Attachment.model_validate_json('{"content": "aGVsbG8="}')

    assert attachment.content.data == b"hello"
    assert attachment.model_dump_json() == '{"content":"aGVsbG8"}'
    assert attachment.model_dump() == {"content": "aGVsbG8"}


def test_model_accepts_raw_bytes():
    attachment = Attachment(content=b"hello")

    assert attachment.content == Base64Data(b"hello")


def test_model_rejects_invalid_base64():
    with pytest.raises(ValidationError) as exc_info:
        Attachment.model_validate_json('{"content": "not base64!"}')

    assert "Could not decode base64 data: not base64!" in str(exc_info.value)


def test_model_json_schema_is_inlined_byte_string():
    schema = Attachment.model_json_schema()

    assert schema["properties"]["content"]["type"] == "string"
    assert schema["properties"]["content"]["format"] == "byte"
    assert "$defs" not in schema
