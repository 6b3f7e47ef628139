"""
Custom exceptions for SkewT Charts package.

This module defines exception classes for better error handling and messaging
across the package, particularly in the API, profile loading, and command-line
workflows.
"""


class SkewTChartsError(Exception):
    """Base exception class for all SkewT Charts errors."""
    pass


class ProfileError(SkewTChartsError):
    """
    Raised when a sounding profile cannot be loaded or is invalid.

    This typically occurs when a profile file has an unsupported format,
    contains no usable levels, or carries non-positive pressures or
    non-finite heights.
    """
    pass


class RenderError(SkewTChartsError):
    """
    Raised when diagram rendering fails.

    This can occur due to matplotlib errors while drawing or while writing
    the rendered figure to disk.
    """
    pass


class InvalidParameterError(SkewTChartsError):
    """
    Raised for invalid user inputs.

    This exception is used for parameter validation failures such as
    an empty or inverted height range when zooming, or invalid
    configuration options.
    """
    pass
