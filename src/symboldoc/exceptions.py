#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the symboldoc library.

This module defines specialized exception classes for the error conditions
that can occur while parsing documentation XML. Rendering never raises; only
option validation and parsing do.

Exception Hierarchy
-------------------
- SymbolDocError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser/renderer)

  - ParsingError (input document parsing failures)
    - DocXmlError (documentation XML failures)
      - UnknownDocXmlParseError (reader failed without detail)
      - DocXmlParseError (wraps the underlying tokenizer failure)
      - DocXmlStructureError (structural rule violations)
        - MissingRequiredAttributeError
        - MissingRequiredChildElementError
        - MoreThanOneElementError
        - ElementNotInsideExpectedParentElementError
      - DocXmlContractError (structure the upstream extractor never emits)

"""

from typing import Any


class SymbolDocError(Exception):
    """Base exception class for all symboldoc-specific errors.

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


class ValidationError(SymbolDocError):
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
    """Exception raised when the wrong options class is provided.

    Parameters
    ----------
    component_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received

    """

    def __init__(self, component_name: str, expected_type: type, received_type: type):
        """Initialize the invalid options error."""
        message = (
            f"{component_name} expected options of type '{expected_type.__name__}' "
            f"but received '{received_type.__name__}'."
        )
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(SymbolDocError):
    """Exception raised when document parsing fails.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class DocXmlError(ParsingError):
    """Base class for failures while parsing documentation XML."""


class UnknownDocXmlParseError(DocXmlError):
    """The XML reader reported failure without any detail."""

    def __init__(self, message: str = "Documentation XML could not be parsed"):
        """Initialize the unknown parse error."""
        super().__init__(message, parsing_stage="tokenize")


class DocXmlParseError(DocXmlError):
    """The underlying XML tokenizer rejected the input.

    The tokenizer's exception is available as ``original_error``.
    """

    def __init__(self, original_error: Exception, message: str | None = None):
        """Initialize the parse error around the tokenizer failure."""
        if message is None:
            message = f"Invalid documentation XML: {original_error}"
        super().__init__(message, parsing_stage="tokenize", original_error=original_error)


class DocXmlStructureError(DocXmlError):
    """Base class for structural rule violations found by the state machine.

    Structure errors compare equal when they have the same class and the same
    element details, so ``MoreThanOneElementError("Abstract")`` raised by the
    parser equals a freshly constructed one.
    """

    _detail_fields: tuple[str, ...] = ()

    def __init__(self, message: str):
        """Initialize the structure error."""
        super().__init__(message, parsing_stage="structure")

    def _details(self) -> tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self._detail_fields)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        assert isinstance(other, DocXmlStructureError)
        return self._details() == other._details()

    def __hash__(self) -> int:
        return hash((type(self), self._details()))

    def __repr__(self) -> str:
        args = ", ".join(repr(value) for value in self._details())
        return f"{type(self).__name__}({args})"


class MissingRequiredAttributeError(DocXmlStructureError):
    """A required attribute is missing, e.g. ``<Link>`` without ``href``."""

    _detail_fields = ("element", "attribute")

    def __init__(self, element: str, attribute: str):
        """Initialize with the element and its missing attribute."""
        super().__init__(f"<{element}> is missing required attribute '{attribute}'")
        self.element = element
        self.attribute = attribute


class MissingRequiredChildElementError(DocXmlStructureError):
    """A required child element is missing, e.g. ``<Parameter>`` without ``<Name>``."""

    _detail_fields = ("element", "child_element")

    def __init__(self, element: str, child_element: str):
        """Initialize with the element and its missing child."""
        super().__init__(f"<{element}> is missing required child element <{child_element}>")
        self.element = element
        self.child_element = child_element


class MoreThanOneElementError(DocXmlStructureError):
    """An element that may appear only once was found again."""

    _detail_fields = ("element",)

    def __init__(self, element: str):
        """Initialize with the repeated element name."""
        super().__init__(f"More than one <{element}> element")
        self.element = element


class ElementNotInsideExpectedParentElementError(DocXmlStructureError):
    """An element appeared outside of the parent it belongs in."""

    _detail_fields = ("element", "expected_parent_element")

    def __init__(self, element: str, expected_parent_element: str):
        """Initialize with the element and the parent it should be inside."""
        super().__init__(f"<{element}> must be inside <{expected_parent_element}>")
        self.element = element
        self.expected_parent_element = expected_parent_element


class DocXmlContractError(DocXmlError):
    """The input violates structure that documentation extractors never emit.

    Examples are an unexpected root element, ``<Name>`` outside the root or a
    parameter, and CDATA outside ``rawHTML``/``zCodeLineNumbered``. These are
    raised immediately instead of being recorded.
    """

    def __init__(self, message: str):
        """Initialize the contract error."""
        super().__init__(message, parsing_stage="contract")
