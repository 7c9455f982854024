"""
Carrot Client Library

A Python client for the Carrot social-gaming service. It creates and
validates users and posts HMAC-signed achievements, high scores, actions
and likes.

Example usage:
    from carrot import Carrot, PostOutcome

    client = Carrot("your-app-id", "your-app-secret", "user@example.com")
    if client.post_achievement("first_blood") is PostOutcome.SUCCESS:
        ...
"""

from .client import Carrot
from .exceptions import (
    CarrotError,
    ConfigurationError,
    TransportError
)
from .outcomes import (
    CreationOutcome,
    PostOutcome,
    ValidationOutcome
)
from .constants import (
    DEFAULT_CONFIG,
    DEFAULT_HOSTNAME,
    LikeObjectType
)

__version__ = "1.0.0"
__author__ = "Carrot Inc."
__all__ = [
    "Carrot",
    "CarrotError",
    "ConfigurationError",
    "TransportError",
    "CreationOutcome",
    "PostOutcome",
    "ValidationOutcome",
    "DEFAULT_CONFIG",
    "DEFAULT_HOSTNAME",
    "LikeObjectType"
]
