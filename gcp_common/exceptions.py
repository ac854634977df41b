"""
Errors raised by gcp_common.

Broker errors are not wrapped: callers catch google.api_core.exceptions.NotFound
and AlreadyExists directly. Argument and precondition failures raise ValueError.
"""

from google.api_core.exceptions import AlreadyExists, NotFound


class NoSuchServiceError(LookupError):
    """Raised when a service type has no registered instance."""

    def __init__(self, service_type):
        self.service_type = service_type
        name = getattr(service_type, "__name__", str(service_type))
        super().__init__(f"No service of type '{name}' available")


class ConditionTimeoutError(AssertionError):
    """Raised when a polled condition is not met within its timeout."""


__all__ = [
    "AlreadyExists",
    "NotFound",
    "NoSuchServiceError",
    "ConditionTimeoutError",
]
