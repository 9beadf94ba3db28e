"""Exceptions raised by headtags."""


class MetaTagsError(Exception):
    """Base class for all headtags errors."""


class ValidationError(MetaTagsError, ValueError):
    """A tag was given an attribute set its kind cannot accept."""
