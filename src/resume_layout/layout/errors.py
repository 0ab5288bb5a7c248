"""Exceptions raised by the layout pipeline."""

from __future__ import annotations

__all__ = ["MeasurementError", "ResumeLayoutError", "ValidationError"]


class ResumeLayoutError(Exception):
    """Base class for every failure that aborts a resume render."""


class ValidationError(ResumeLayoutError):
    """The input record is missing a mandatory field."""


class MeasurementError(ResumeLayoutError):
    """Font metrics could not be resolved for a style class."""
