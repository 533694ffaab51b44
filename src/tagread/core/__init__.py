"""Core utilities shared across tagread layers."""

from .byte_cursor import ByteCursor

__all__ = ["ByteCursor"]
