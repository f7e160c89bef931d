"""Exception hierarchy for Shapekit.

The geometry, rectangle and string helpers are total functions and never
raise; these exceptions only surface where user input is parsed.
"""


class ShapekitError(Exception):
    """Base exception for all Shapekit errors."""

    pass


class InputError(ShapekitError):
    """Errors related to user-supplied input."""

    pass


class PointParseError(InputError):
    """A point token could not be parsed."""

    def __init__(self, token: str, reason: str) -> None:
        self.token = token
        self.reason = reason
        super().__init__(f"Invalid point '{token}': {reason}")
