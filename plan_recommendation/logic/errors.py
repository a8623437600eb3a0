"""
Errors raised by the scoring engine.

All of them are caller contract violations reported synchronously; an
empty catalog or a catalog where every template is excluded is not an
error and yields an empty result instead.
"""


class RecommendationError(Exception):
    """Base class for recommendation engine errors."""


class InvalidProfileError(RecommendationError):
    """A profile field is outside its enumerated or numeric domain."""


class InvalidLimitError(RecommendationError):
    """The requested result limit is not a positive integer."""


class InvalidTemplateError(RecommendationError):
    """A catalog entry could not be read as a plan template."""
