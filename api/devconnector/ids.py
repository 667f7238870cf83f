"""Identifier parsing for path parameters."""

from uuid import UUID

from devconnector.exceptions import MalformedIdError


def parse_id(value: str) -> UUID:
    """
    Parse a document id taken from a URL.

    A value that is not a UUID cannot match any document, so it is reported
    as not found rather than as a validation error.
    """
    try:
        return UUID(value)
    except ValueError:
        raise MalformedIdError(value) from None
