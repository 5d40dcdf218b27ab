"""Errors raised by the API client and its scalar types."""

from typing import Optional


class ApiError(Exception):
    """Base class for errors produced by client methods."""

    status: Optional[int] = None


class InvalidRequestError(ApiError):
    """The request did not conform to API requirements."""


class CommunicationError(ApiError):
    """The request could not be delivered or the connection failed."""


class SerdeError(ApiError):
    """An expected response whose deserialization failed."""

    def __init__(self, message: str, status: int, body: str):
        super().__init__(message)
        self.status = status
        self.body = body


class ServerError(ApiError):
    """A response with a non-success status code."""

    def __init__(self, status: int, body: str):
        super().__init__(f"Server responded with status {status}: {body}")
        self.status = status
        self.body = body


class PaginationError(ApiError):
    """The request for the next page could not be built from the current page."""


class Base64DecodeError(ValueError):
    def __init__(self, value: str):
        super().__init__(f"Could not decode base64 data: {value}")
        self.value = value


class PhoneNumberParseError(ValueError):
    def __init__(self, value: str, reason: str):
        super().__init__(f"invalid phone number `{value}`: {reason}")
        self.value = value
        self.reason = reason
