"""Models for apikit."""

from .base import ApiModel
from .page import CursorPage, ForwardPaging, LinkPage, NestedPage, NextPage

__all__ = [
    "ApiModel",
    "CursorPage",
    "ForwardPaging",
    "LinkPage",
    "NestedPage",
    "NextPage",
]
