"""Storage primitives shared by the in-memory repositories."""

from .sequence import IdSequence

__all__ = ["IdSequence"]
