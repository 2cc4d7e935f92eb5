"""Exceptions raised by the rules core."""

from __future__ import annotations


class ParseError(ValueError):
    """A position descriptor could not be parsed."""


class InvariantViolation(RuntimeError):
    """A value broke a domain invariant. Indicates a programming error."""
