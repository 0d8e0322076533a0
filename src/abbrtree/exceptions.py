#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the abbrtree library.

This module defines specialized exception classes for the error conditions
that can occur while configuring, loading or transforming abbreviation trees.
The content transforms themselves degrade gracefully and do not raise on
well-formed trees; these exceptions cover the surrounding surface.

Exception Hierarchy
-------------------
- AbbrTreeError (base exception)

  - ValidationError (parameter/option validation)
    - TreeFormatError (malformed serialized tree data)

  - TransformError (tree transformation failures)

"""

from typing import Any


class AbbrTreeError(Exception):
    """Base exception class for all abbrtree-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(AbbrTreeError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class TreeFormatError(ValidationError):
    """Exception raised when serialized tree data is malformed.

    Raised by the deserialization helpers when a node dictionary is missing
    required keys, carries values of the wrong type, or (in strict mode)
    contains unknown keys.

    Parameters
    ----------
    message : str
        Description of the format problem
    path : str, optional
        Location of the offending node within the serialized tree
        (e.g. ``"root.children[1]"``)
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, path: str | None = None, original_error: Exception | None = None):
        """Initialize the tree format error."""
        if path:
            message = f"{message} (at {path})"
        super().__init__(message, original_error=original_error)
        self.path = path


class TransformError(AbbrTreeError):
    """Exception raised when tree transformation fails.

    Parameters
    ----------
    message : str
        Description of the transform failure
    transform_name : str, optional
        Name of the transform that failed
    original_error : Exception, optional
        The underlying exception that caused the transform failure

    Attributes
    ----------
    transform_name : str or None
        Name of the transform that failed

    """

    def __init__(self, message: str, transform_name: str | None = None, original_error: Exception | None = None):
        """Initialize the transform error."""
        super().__init__(message, original_error)
        self.transform_name = transform_name


__all__ = [
    "AbbrTreeError",
    "ValidationError",
    "TreeFormatError",
    "TransformError",
]
