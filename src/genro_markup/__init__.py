# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-Markup - Form-aware markup generation from tag calls.

A lightweight, zero-dependency library that turns a sequence of tag calls
into well-formed nested markup, filling field values from a bound data
source and flagging invalid fields inline.

Example:
    >>> from genro_markup import MarkupBuilder, Name, RecordSource
    >>> b = MarkupBuilder(RecordSource({'a_button': 'Push Me'}))
    >>> b.button(name=Name('a_button'))
    >>> b.compact()
    '<input name="a_button" type="button" value="Push Me" />'
"""

__version__ = "0.1.0"

from .builder import MarkupBuilder
from .descriptor import TagDescriptor
from .exceptions import (
    ConstructionError,
    ErrorListTypeError,
    MarkupError,
    RecursionOverflowError,
    ShapeError,
    TextTypeError,
)
from .labels import LabelRegistry
from .pretty import UnitKind, classify_unit, prettify
from .shapes import CallShape, Name, classify, normalize
from .source import DataSource, MappingSource, ModelSource, RecordSource, as_source

__all__ = [
    # Core classes
    "MarkupBuilder",
    "TagDescriptor",
    "LabelRegistry",
    # Call shapes
    "Name",
    "CallShape",
    "classify",
    "normalize",
    # Data sources
    "DataSource",
    "RecordSource",
    "MappingSource",
    "ModelSource",
    "as_source",
    # Formatting
    "UnitKind",
    "classify_unit",
    "prettify",
    # Exceptions
    "MarkupError",
    "ShapeError",
    "TextTypeError",
    "RecursionOverflowError",
    "ConstructionError",
    "ErrorListTypeError",
]
