#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the clausemark library.

This module defines the exception classes raised while rewriting annotated
document trees into plain markdown trees. These exceptions provide more
specific error information than generic built-ins.

Exception Hierarchy
-------------------
- ClauseMarkError (base exception)

  - ValidationError (parameter/option validation)
    - SchemaValidationError (a record does not satisfy its schema)
    - InvalidOptionsError (wrong options class for a renderer)

  - UnknownKindError (kind name or node class not in the type registry)

  - RenderingError (markdown generation failures)

"""

from typing import Any


class ClauseMarkError(Exception):
    """Base exception class for all clausemark-specific errors.

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


class ValidationError(ClauseMarkError):
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


class SchemaValidationError(ValidationError):
    """Exception raised when a record does not satisfy its kind's schema.

    Raised by the schema validator when a candidate is missing a required
    field, carries a field its kind does not declare, or holds a value of the
    wrong shape. The rewrite treats this as fatal.

    Parameters
    ----------
    message : str
        Description of the schema mismatch
    node_type : str, optional
        Qualified kind name of the offending record
    field_name : str, optional
        Serialized name of the offending field
    field_value : any, optional
        The offending value
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    node_type : str or None
        Qualified kind name of the offending record
    field_name : str or None
        Serialized name of the offending field

    """

    def __init__(
        self,
        message: str,
        node_type: str | None = None,
        field_name: str | None = None,
        field_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the schema validation error."""
        super().__init__(
            message, parameter_name=field_name, parameter_value=field_value, original_error=original_error
        )
        self.node_type = node_type
        self.field_name = field_name


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided to a renderer.

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
    original_error : Exception, optional
        The original exception that caused this error

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


class UnknownKindError(ClauseMarkError):
    """Exception raised when a kind cannot be resolved by the type registry.

    Parameters
    ----------
    kind_name : str
        The qualified kind name (or class name) that could not be resolved
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    kind_name : str
        The unresolved kind name

    """

    def __init__(self, kind_name: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the unknown kind error."""
        if message is None:
            message = f"Unknown node kind: {kind_name}"
        super().__init__(message, original_error=original_error)
        self.kind_name = kind_name


class RenderingError(ClauseMarkError):
    """Exception raised when markdown rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    node_type : str, optional
        Name of the node kind that could not be rendered
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    node_type : str or None
        Name of the node kind that could not be rendered

    """

    def __init__(self, message: str, node_type: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error=original_error)
        self.node_type = node_type
