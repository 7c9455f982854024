"""
Outcome enumerations for Carrot API calls.

Each endpoint family has its own closed set of outcomes and its own status
table. The tables disagree on how 4xx codes are read, so they are kept as
separate types rather than one shared status map.
"""

from enum import Enum


def _is_success(status: int) -> bool:
    return 200 <= status < 300


class PostOutcome(Enum):
    """Result of a signed POST (achievements, scores, actions, likes)."""
    SUCCESS = "success"
    READ_ONLY = "read_only"
    NOT_FOUND = "not_found"
    NOT_AUTHORIZED = "not_authorized"
    UNKNOWN = "unknown"

    @classmethod
    def from_status(cls, status: int) -> "PostOutcome":
        if _is_success(status):
            return cls.SUCCESS
        if status == 401:
            return cls.READ_ONLY
        if status == 404:
            return cls.NOT_FOUND
        if status == 405:
            return cls.NOT_AUTHORIZED
        return cls.UNKNOWN


class ValidationOutcome(Enum):
    """Result of validating a user with a GET on the users endpoint."""
    AUTHORIZED = "authorized"
    READ_ONLY = "read_only"
    NOT_CREATED = "not_created"
    UNKNOWN = "unknown"

    @classmethod
    def from_status(cls, status: int) -> "ValidationOutcome":
        """
        Classify a validation response.

        Any client error other than 401 means the user does not exist yet
        and should be created with :meth:`Carrot.create_user`.
        """
        if _is_success(status):
            return cls.AUTHORIZED
        if status == 401:
            return cls.READ_ONLY
        if 400 <= status < 500:
            return cls.NOT_CREATED
        return cls.UNKNOWN


class CreationOutcome(Enum):
    """Result of creating a user with a POST on the users endpoint."""
    AUTHORIZED = "authorized"
    READ_ONLY = "read_only"
    NOT_AUTHORIZED = "not_authorized"
    UNKNOWN = "unknown"

    @classmethod
    def from_status(cls, status: int) -> "CreationOutcome":
        if _is_success(status):
            return cls.AUTHORIZED
        if status == 401:
            return cls.READ_ONLY
        if status == 405:
            return cls.NOT_AUTHORIZED
        return cls.UNKNOWN
