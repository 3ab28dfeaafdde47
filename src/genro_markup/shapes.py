# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Call-shape normalization.

A tag call can be made with several argument shapes. This module classifies
the shape by arity and per-position type, then reduces it to a
TagDescriptor:

    ====================  ==============================  ======================
    Shape                 Arguments                       Attributes
    ====================  ==============================  ======================
    MAPPING               {'class': 'x'}  or  ({...},)    {'class': 'x'}
    EMPTY                 ()                              {}
    TEXT                  ('Hello',)                      {'text': 'Hello'}
    NAME                  (Name('user'),)                 {'name': 'user'}
    NAME_MAPPING          (Name('user'), {'size': 20})    {'name': 'user', 'size': 20}
    NAME_TEXT             (Name('user'), 'User')          {'name': 'user', 'text': 'User'}
    ====================  ==============================  ======================

For the 'label' tag, NAME_TEXT produces {'for': name, 'text': text} and
registers the name so that a later input with the same name gets an id.

Example:
    >>> desc = normalize('div', (Name('list'), {'class': 'list-class'}))
    >>> desc.attr
    {'name': 'list', 'class': 'list-class'}
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, TYPE_CHECKING

from .descriptor import TagDescriptor
from .exceptions import ShapeError

if TYPE_CHECKING:
    from .labels import LabelRegistry


class Name(str):
    """A bare field identifier, as opposed to a text string.

    ``Name('email')`` becomes the 'name' attribute of a tag, while a plain
    ``'email'`` becomes its text.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Name({str.__repr__(self)})"


class CallShape(Enum):
    """Recognized argument shapes for a tag call."""

    MAPPING = 'mapping'
    EMPTY = 'empty'
    TEXT = 'text'
    NAME = 'name'
    NAME_MAPPING = 'name+mapping'
    NAME_TEXT = 'name+text'


def classify(args: Mapping[str, Any] | Sequence[Any]) -> CallShape | None:
    """Return the shape of an argument bundle, or None if unrecognized."""
    if isinstance(args, Mapping):
        return CallShape.MAPPING
    if isinstance(args, (str, bytes)) or not isinstance(args, Sequence):
        return None
    if len(args) == 0:
        return CallShape.EMPTY
    if len(args) == 1:
        first = args[0]
        if isinstance(first, Name):
            return CallShape.NAME
        if isinstance(first, str):
            return CallShape.TEXT
        if isinstance(first, Mapping):
            return CallShape.MAPPING
        return None
    if len(args) == 2 and isinstance(args[0], Name):
        second = args[1]
        if isinstance(second, Mapping):
            return CallShape.NAME_MAPPING
        if isinstance(second, str) and not isinstance(second, Name):
            return CallShape.NAME_TEXT
    return None


def normalize(
    tag: str,
    args: Mapping[str, Any] | Sequence[Any],
    labels: LabelRegistry | None = None,
) -> TagDescriptor:
    """Reduce an argument bundle to a TagDescriptor.

    The caller's mappings are copied, never modified.

    Args:
        tag: The tag name.
        args: A mapping of attributes, or a sequence of positional arguments.
        labels: Registry updated when a label is declared with NAME_TEXT.

    Raises:
        ShapeError: If the bundle matches no recognized shape.
    """
    shape = classify(args)

    if shape is CallShape.MAPPING:
        source = args if isinstance(args, Mapping) else args[0]
        attr = {str(k): v for k, v in source.items()}
    elif shape is CallShape.EMPTY:
        attr = {}
    elif shape is CallShape.TEXT:
        attr = {'text': args[0]}
    elif shape is CallShape.NAME:
        attr = {'name': args[0]}
    elif shape is CallShape.NAME_MAPPING:
        attr = {'name': args[0]}
        attr.update((str(k), v) for k, v in args[1].items())
    elif shape is CallShape.NAME_TEXT:
        name, text = args
        if tag == 'label':
            attr = {'for': name, 'text': text}
            if labels is not None:
                labels.push(name)
        else:
            attr = {'name': name, 'text': text}
    else:
        raise ShapeError(
            f"Unrecognized arguments for tag {tag!r}: args={args!r}"
        )

    return TagDescriptor(tag, attr)
