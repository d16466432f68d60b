"""Exceptions raised by the segmentation engine."""


class SegmenterError(Exception):
    """Base class for segmentation errors."""


class ValidationError(SegmenterError, ValueError):
    """Raised when a format descriptor (origin) cannot be used."""
