# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Inline error annotations for invalid fields."""

from __future__ import annotations

from collections.abc import Collection
from typing import TYPE_CHECKING

from .exceptions import ErrorListTypeError

if TYPE_CHECKING:
    from .descriptor import TagDescriptor
    from .source import DataSource


WARNING_TEMPLATE = '<warn> <-- {message}</warn>'
FIELD_TAGS = frozenset({'input', 'select'})


def annotate(
    desc: TagDescriptor,
    source: DataSource | None,
    field_tags: Collection[str] = FIELD_TAGS,
    template: str = WARNING_TEMPLATE,
) -> str:
    """Return the annotation to place after a tag, or ''.

    Only field-carrying tags are annotated, with the first message the
    source reports for their name.

    Raises:
        ErrorListTypeError: If the source reports errors that are not a list.
    """
    name = desc.name
    if source is None or name is None:
        return ''

    messages = source.errors_for(name)
    if messages is None:
        return ''
    if not isinstance(messages, (list, tuple)):
        raise ErrorListTypeError(
            f"Errors for field {name!r} must be a list of str, got {messages!r}"
        )
    if not messages or desc.tag not in field_tags:
        return ''
    return template.format(message=messages[0])
