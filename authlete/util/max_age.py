"""
Check of the ``max_age`` request parameter against the authentication time.
"""

import time
from typing import Optional, Union

from .language import parse_integer

Timestamp = Union[int, str]


class MaxAgeValidator:
    """
    Validates that an end-user authentication is still fresh enough.

    Authentication is considered valid while
    ``current_time < auth_time + max_age``. Every value may be given as an
    integer or as a decimal string (Authlete sends large values as strings).
    """

    def __init__(self, max_age: Optional[Timestamp] = 0,
                 auth_time: Optional[Timestamp] = 0,
                 current_time: Optional[Timestamp] = None):
        self.max_age = max_age
        self.auth_time = auth_time
        self.current_time = current_time

    def set_max_age(self, max_age: Optional[Timestamp]) -> "MaxAgeValidator":
        self.max_age = max_age
        return self

    def set_authentication_time(self, auth_time: Optional[Timestamp]) -> "MaxAgeValidator":
        self.auth_time = auth_time
        return self

    def set_current_time(self, current_time: Optional[Timestamp]) -> "MaxAgeValidator":
        self.current_time = current_time
        return self

    def validate(self) -> bool:
        """Return ``True`` if the authentication has not expired."""
        if not self.max_age or self.max_age == "0":
            return True

        max_age = parse_integer(self.max_age)
        auth_time = parse_integer(self.auth_time)

        if self.current_time is None:
            current_time = int(time.time())
        else:
            current_time = parse_integer(self.current_time)

        return current_time < auth_time + max_age
