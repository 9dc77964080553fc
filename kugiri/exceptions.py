"""
Custom exceptions for the kugiri package.

This module defines exception classes used throughout the kugiri library
to provide clear error messages for various failure conditions.
"""


class KugiriError(Exception):
    """
    Base exception class for all kugiri-related errors.

    This exception serves as the parent class for more specific exceptions
    and can be used to catch any error raised by the kugiri library.

    Example:
        >>> try:
        ...     segment(text)
        ... except KugiriError as e:
        ...     print(f"Kugiri error: {e}")
    """
    pass


class ModelDataError(KugiriError):
    """
    Raised when the weight data cannot be loaded.

    This exception is raised when:
    - A row of the weight data is malformed or has a non-integer weight
    - The same (family, key) pair appears more than once
    """
    pass


class MissingInputError(KugiriError, ValueError):
    """
    Raised when no input text was supplied to the segmenter.

    Segmentation itself never fails for a string, including the empty
    string. This error marks the caller forgetting to pass one at all.
    """
    pass
