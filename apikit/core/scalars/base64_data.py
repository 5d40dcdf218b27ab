"""Base64 data that encodes to URL-safe base64 but decodes from several dialects.

Producers disagree on the alphabet, padding and line wrapping they use, so
decoding accepts any of the dialects in ``ALLOWED_DECODING_FORMATS`` while
encoding always emits URL-safe base64 without padding.
"""

import base64
from dataclasses import dataclass
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from ..errors import Base64DecodeError

STANDARD_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
URL_SAFE_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"


@dataclass(frozen=True)
class Base64Dialect:
    """One alphabet/padding convention accepted when decoding."""

    name: str
    alphabet: str
    padded: bool
    ignore: str = ""

    def decode(self, value: str) -> bytes:
        text = value
        for char in self.ignore:
            text = text.replace(char, "")

        body = text.rstrip("=") if self.padded else text
        padding = len(text) - len(body)
        if any(char not in self.alphabet for char in body):
            raise ValueError(f"{self.name}: invalid symbol")
        if len(body) % 4 == 1:
            raise ValueError(f"{self.name}: invalid length")
        if self.padded and (len(text) % 4 != 0 or padding > 2):
            raise ValueError(f"{self.name}: invalid padding")

        # Leftover bits of the final symbol must be zero.
        remainder = len(body) % 4
        if remainder:
            last = self.alphabet.index(body[-1])
            mask = 0b1111 if remainder == 2 else 0b11
            if last & mask:
                raise ValueError(f"{self.name}: non-zero trailing bits")

        padded = body + "=" * (-len(body) % 4)
        if self.alphabet == URL_SAFE_ALPHABET:
            return base64.urlsafe_b64decode(padded)
        return base64.b64decode(padded, validate=True)


ALLOWED_DECODING_FORMATS = (
    Base64Dialect("BASE64", STANDARD_ALPHABET, padded=True),
    Base64Dialect("BASE64URL", URL_SAFE_ALPHABET, padded=True),
    Base64Dialect("BASE64URL_NOPAD", URL_SAFE_ALPHABET, padded=False),
    Base64Dialect("BASE64_MIME", STANDARD_ALPHABET, padded=True, ignore="\r\n"),
    Base64Dialect("BASE64_NOPAD", STANDARD_ALPHABET, padded=False),
)


class Base64Data:
    """A container for binary that is base64 encoded in serialization.

    Constructing from bytes performs no validation. Use ``Base64Data.decode``
    for wire strings.
    """

    __slots__ = ("_data",)

    def __init__(self, data: bytes = b""):
        self._data = bytes(data)

    @classmethod
    def decode(cls, value: str) -> "Base64Data":
        """Decode ``value`` with the first dialect that accepts it.

        Raises:
            Base64DecodeError: if none of the allowed dialects accept the input
        """
        for dialect in ALLOWED_DECODING_FORMATS:
            try:
                return cls(dialect.decode(value))
            except ValueError:
                continue
        raise Base64DecodeError(value)

    def encode(self) -> str:
        return base64.urlsafe_b64encode(self._data).decode("ascii").rstrip("=")

    def is_empty(self) -> bool:
        return len(self._data) == 0

    @property
    def data(self) -> bytes:
        return self._data

    def __bytes__(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        return f"Base64Data({self._data!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Base64Data):
            return self._data == other._data
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._data)

    @classmethod
    def _validate(cls, value: Any) -> "Base64Data":
        if isinstance(value, Base64Data):
            return value
        if isinstance(value, (bytes, bytearray)):
            return cls(value)
        if isinstance(value, str):
            return cls.decode(value)
        raise ValueError("Expected a base64 encoded string")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.encode(), when_used="always"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "format": "byte"}
