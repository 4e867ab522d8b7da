"""
Exception classes for reshaper.

Helpers degrade gracefully on malformed input, so the only error raised
during normal use is TransformNotImplementedError, signalling a resource
class that never supplied its own transform.
"""


class ReshaperError(Exception):
    """Base exception for all reshaper errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class TransformNotImplementedError(ReshaperError, NotImplementedError):
    """Raised when the base Resource.transform is called without an override"""

    def __init__(self, resource_name: str, message: str | None = None):
        details = {"resource": resource_name}
        msg = message or (
            f"{resource_name}.transform() must be implemented. "
            "Define a transform classmethod in your resource class."
        )
        super().__init__(msg, details)
        self.resource_name = resource_name
