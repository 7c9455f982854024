"""
Custom exceptions for the Carrot client library.

Remote outcomes (read-only users, missing resources, ...) are returned as
values from the client methods and never raised; only local problems end up
here.
"""


class CarrotError(Exception):
    """Base exception for Carrot client errors."""
    pass


class ConfigurationError(CarrotError):
    """Raised when client configuration is invalid."""
    pass


class TransportError(CarrotError):
    """Raised when the HTTP exchange itself fails (DNS, TLS, refused, timeout)."""
    pass
