#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the adf2mdast library.

This module defines specialized exception classes for the error conditions
that can occur while converting ADF documents into mdast trees. These
exceptions provide more specific error information than generic built-ins.

Exception Hierarchy
-------------------
- Adf2MdastError (base exception)

  - ValidationError (parameter/option/input shape validation)
    - InvalidOptionsError (wrong options class for the converter)
    - InvalidNodeError (malformed ADF node shape)

  - ParsingError (input document parsing failures)
    - UnsupportedNodeError (unknown node type in strict mode)

"""

from typing import Any


class Adf2MdastError(Exception):
    """Base exception class for all adf2mdast-specific errors.

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


class ValidationError(Adf2MdastError):
    """Exception raised for invalid input parameters, options or input shape.

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


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options object is provided to the converter.

    Parameters
    ----------
    converter_name : str
        Name of the converter that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class InvalidNodeError(ValidationError):
    """Exception raised when an ADF node does not have a valid shape.

    Raised for nodes that are not objects, lack a string ``type`` tag,
    mix ``content`` and ``text``, carry malformed marks, or nest deeper
    than the configured limit.

    Parameters
    ----------
    message : str
        Description of the shape violation
    node_path : str, default "/"
        JSON-pointer-like location of the offending node (e.g. ``/content/0``)
    node_value : any, optional
        The offending node value
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    node_path : str
        Location of the offending node in the source tree

    """

    def __init__(
        self,
        message: str,
        node_path: str = "/",
        node_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid node error."""
        node_path = node_path or "/"
        super().__init__(
            f"Invalid node shape at {node_path}: {message}",
            parameter_name="document",
            parameter_value=node_value,
            original_error=original_error,
        )
        self.node_path = node_path


class ParsingError(Adf2MdastError):
    """Exception raised when document parsing fails.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    Attributes
    ----------
    parsing_stage : str or None
        Where in the parsing process the error occurred

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class UnsupportedNodeError(ParsingError):
    """Exception raised in strict mode when a node type has no conversion rule.

    Parameters
    ----------
    node_type : str
        The ADF type tag that could not be converted
    message : str, optional
        Custom error message

    Attributes
    ----------
    node_type : str
        The unsupported type tag

    """

    def __init__(self, node_type: str, message: str | None = None):
        """Initialize the unsupported node error."""
        if message is None:
            message = f"No conversion rule for ADF node type '{node_type}' (strict mode)"
        super().__init__(message, parsing_stage="node_conversion")
        self.node_type = node_type


__all__ = [
    "Adf2MdastError",
    "ValidationError",
    "InvalidOptionsError",
    "InvalidNodeError",
    "ParsingError",
    "UnsupportedNodeError",
]
