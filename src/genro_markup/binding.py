# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Data binding of field values into tag attributes."""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .descriptor import TagDescriptor
    from .source import DataSource

logger = logging.getLogger(__name__)


def bind_value(
    desc: TagDescriptor,
    source: DataSource | None,
    multiline_tags: Collection[str] = ('textarea',),
) -> None:
    """Fill a descriptor's value (or text) from the bound data source.

    Nothing is bound when the tag has no name, there is no source, a value
    was given, or the source has nothing (None or '') for the field. An
    attribute the caller supplied, even as '', is never overwritten.

    Args:
        desc: The descriptor to update in place.
        source: The bound data source, if any.
        multiline_tags: Tags whose bound value goes into the text.
    """
    name = desc.name
    if name is None or source is None:
        return
    if desc.attr.get('value') is not None:
        return

    data = source.lookup(name)
    if data is None or (isinstance(data, str) and data == ''):
        return

    key = 'text' if desc.tag in multiline_tags else 'value'
    if key not in desc.attr:
        logger.debug("bound %s=%r for %r", key, data, name)
        desc.attr[key] = data
