"""Errors."""


class SerializationError(Exception):
    """Items could not be encoded as Script Filter JSON."""
