"""
Custom Exception classes for Burstipy.

All custom exceptions inherit from the base BurstipyError class, which
itself inherits from Python's Exception class.

A trace that is silent, too regular or implausible is NOT an error: the
analysis functions report it as NotApplicable. These exceptions are reserved
for malformed input and misconfiguration.
"""


class BurstipyError(Exception):
    """Base class for Burstipy specific errors."""

    pass


class InvalidInputError(BurstipyError, ValueError):
    """Voltage/time traces are empty, mismatched in length or not 1-D numeric."""

    pass


class ConfigurationError(BurstipyError):
    """Error occurred while building or validating a detection configuration."""

    pass


class AnalysisError(BurstipyError):
    """Error occurred during data analysis operations."""

    pass


class PlottingError(BurstipyError):
    """Error occurred during figure generation."""

    pass


class ExportError(BurstipyError, IOError):
    """Error occurred during figure saving/exporting."""

    pass
