#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the delta2html library.

The grouping engine itself never raises on well-formed operations; these
exceptions belong to the layers around it (options, configuration, delta
intake and rendering).

Exception Hierarchy
-------------------
- Delta2HtmlError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a component)

  - ConfigError (configuration discovery and loading)

  - ParsingError (input that is not a delta)

  - RenderingError (output generation failures)

"""

from typing import Any


class Delta2HtmlError(Exception):
    """Base exception class for all delta2html-specific errors.

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


class ValidationError(Delta2HtmlError):
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


class InvalidOptionsError(ValidationError):
    """Exception raised when an options object of the wrong class is provided.

    Parameters
    ----------
    component_name : str
        Name of the component that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        component_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{component_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class ConfigError(Delta2HtmlError):
    """Exception raised when a configuration file cannot be used.

    Parameters
    ----------
    message : str
        Description of the problem
    config_path : str, optional
        Path of the offending configuration file

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the config error."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


class ParsingError(Delta2HtmlError):
    """Exception raised when input cannot be read as a Quill delta."""


class RenderingError(Delta2HtmlError):
    """Exception raised when rendering the document tree fails.

    Parameters
    ----------
    message : str
        Description of the rendering error
    group_type : str, optional
        Tag of the group being rendered when the error occurred

    """

    def __init__(self, message: str, group_type: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error=original_error)
        self.group_type = group_type


__all__ = [
    "Delta2HtmlError",
    "ValidationError",
    "InvalidOptionsError",
    "ConfigError",
    "ParsingError",
    "RenderingError",
]
