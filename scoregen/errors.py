"""Domain errors raised at construction boundaries."""

from __future__ import annotations


class InvalidRating(ValueError):
    """Team rating does not fit the declared strength category."""


class InvalidScore(ValueError):
    """Score constructed with a negative or non-integer goal count."""


class InvalidConfiguration(ValueError):
    """Generator or home advantage parameters out of range."""
