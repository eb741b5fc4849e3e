"""
HTTP Basic authentication credentials (RFC 7617).
"""

import base64
import binascii
import re
from typing import Optional

from ..util.language import or_empty
from ..util.validation import ensure_null_or_string

_CHALLENGE_PATTERN = re.compile(r'^Basic *(?P<parameter>[^ ]+) *$', re.IGNORECASE)


class BasicCredentials:
    """A user ID and password pair."""

    def __init__(self, user_id: Optional[str] = None, password: Optional[str] = None):
        ensure_null_or_string('user_id', user_id)
        ensure_null_or_string('password', password)
        self.user_id = user_id
        self.password = password

    @property
    def credentials(self) -> str:
        """``user_id:password``, with missing parts rendered as empty."""
        return f"{or_empty(self.user_id)}:{or_empty(self.password)}"

    def header_value(self) -> str:
        """Value for the ``Authorization`` header."""
        encoded = base64.b64encode(self.credentials.encode('utf-8')).decode('ascii')
        return f"Basic {encoded}"

    @classmethod
    def parse(cls, header_value: Optional[str]) -> "BasicCredentials":
        """
        Parse the value of an ``Authorization`` header. Anything that is not
        a well-formed Basic header yields empty credentials.
        """
        if header_value is None:
            return cls()

        match = _CHALLENGE_PATTERN.match(header_value)
        if not match:
            return cls()

        try:
            plain = base64.b64decode(match.group('parameter'), validate=True).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError):
            return cls()

        user_id, sep, password = plain.partition(':')
        return cls(user_id, password if sep else None)

    def __eq__(self, other):
        if not isinstance(other, BasicCredentials):
            return NotImplemented
        return (self.user_id, self.password) == (other.user_id, other.password)

    def __repr__(self) -> str:
        return f"BasicCredentials(user_id={self.user_id!r})"
