"""Custom scalar types with their own wire formats."""

from .base64_data import Base64Data
from .phone_number import PhoneNumber

__all__ = ["Base64Data", "PhoneNumber"]
