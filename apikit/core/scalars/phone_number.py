"""Phone numbers for JSON serialization and deserialization."""

import logging
from typing import Any, Optional

import phonenumbers
from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from ..errors import PhoneNumberParseError

logger = logging.getLogger(__name__)

# Numbers without a country code are assumed to be North American.
DEFAULT_COUNTRY_PREFIX = "+1"
STRIPPED_CHARACTERS = "-() "


class PhoneNumber:
    """A phone number, or the absent value when ``number`` is None."""

    __slots__ = ("_number",)

    def __init__(self, number: Optional[phonenumbers.PhoneNumber] = None):
        self._number = number

    @classmethod
    def from_str(cls, value: str) -> "PhoneNumber":
        """Parse a loosely formatted phone number.

        An empty or whitespace-only string yields the absent value. Input not
        starting with ``+`` is prefixed with ``+1`` and formatting punctuation
        is stripped before parsing.

        Raises:
            PhoneNumberParseError: if the cleaned string is not a phone number
        """
        trimmed = value.strip()
        if not trimmed:
            return cls()

        cleaned = trimmed if trimmed.startswith("+") else f"{DEFAULT_COUNTRY_PREFIX}{value}"
        for char in STRIPPED_CHARACTERS:
            cleaned = cleaned.replace(char, "")

        try:
            number = phonenumbers.parse(cleaned, None)
        except phonenumbers.NumberParseException as e:
            raise PhoneNumberParseError(cleaned, str(e)) from e
        return cls(number)

    @property
    def number(self) -> Optional[phonenumbers.PhoneNumber]:
        return self._number

    def is_empty(self) -> bool:
        return self._number is None

    def __str__(self) -> str:
        if self._number is None:
            return ""
        return phonenumbers.format_number(
            self._number, phonenumbers.PhoneNumberFormat.INTERNATIONAL
        )

    def __repr__(self) -> str:
        return f"PhoneNumber({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PhoneNumber):
            return self._number == other._number
        return NotImplemented

    def __hash__(self) -> int:
        if self._number is None:
            return hash(None)
        return hash(
            phonenumbers.format_number(self._number, phonenumbers.PhoneNumberFormat.E164)
        )

    @classmethod
    def _validate(cls, value: Any) -> "PhoneNumber":
        if isinstance(value, PhoneNumber):
            return value
        if isinstance(value, phonenumbers.PhoneNumber):
            return cls(value)
        if not isinstance(value, str):
            value = ""
        try:
            return cls.from_str(value)
        except PhoneNumberParseError as e:
            logger.warning(f"Treating unparsable phone number as empty: {e}")
            return cls()

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="always"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "format": "phone"}
