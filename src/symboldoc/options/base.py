#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for parser and renderer options.

Options are frozen dataclasses; use ``create_updated`` to derive a modified
copy instead of mutating an instance.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

from symboldoc.exceptions import InvalidOptionsError

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Subclasses define format-specific parsing options as frozen dataclass fields.
    """


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Subclasses define format-specific rendering options as frozen dataclass fields.
    """


def validate_options_type(options: object, expected_type: type, component_name: str) -> None:
    """Validate that options are of the correct type for a parser or renderer.

    Parameters
    ----------
    options : object
        The options object to validate, or None
    expected_type : type
        The expected options class type
    component_name : str
        Name of the parser or renderer (for error messages)

    Raises
    ------
    InvalidOptionsError
        If options are not None and not an instance of expected_type

    """
    if options is not None and not isinstance(options, expected_type):
        raise InvalidOptionsError(
            component_name=component_name,
            expected_type=expected_type,
            received_type=type(options),
        )
