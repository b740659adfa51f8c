"""
Exception hierarchy for the EcoPulse analysis pipeline.

Every failure of a refresh cycle is raised as an ``EcoPulseError`` so the
dashboard controller and the API can handle them in one place.
"""


class EcoPulseError(Exception):
    """Base class for all EcoPulse errors."""


class GenerationServiceError(EcoPulseError):
    """The remote generation service could not be reached or rejected the call."""


class ResponseParseError(EcoPulseError):
    """The model returned an empty or non-JSON response."""


class ResponseValidationError(EcoPulseError):
    """The model returned JSON that does not match the declared schema."""


class RequestTimeoutError(EcoPulseError):
    """A call to the generation service exceeded its timeout."""
