# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Label registry for label-to-control id correlation."""

from __future__ import annotations

import logging
from typing import Any, Iterator

from .descriptor import TagDescriptor

logger = logging.getLogger(__name__)


class LabelRegistry:
    """Ordered record of field names that received a <label>.

    Entries are never consumed: one label gives an id to every later
    control with the same name. Controls emitted before their label
    are not fixed up afterwards.

    Example:
        >>> labels = LabelRegistry()
        >>> labels.push('username')
        >>> 'username' in labels
        True
    """

    __slots__ = ('_names',)

    def __init__(self) -> None:
        self._names: list[Any] = []

    def __repr__(self) -> str:
        return f"LabelRegistry({self._names!r})"

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[Any]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def push(self, name: Any) -> None:
        """Register a field name as labeled."""
        logger.debug("label registered for %r", name)
        self._names.append(name)

    def clear(self) -> None:
        """Forget all registered names."""
        self._names.clear()

    def correlate(self, desc: TagDescriptor) -> None:
        """Give an input the id of its label, if one was registered.

        Only applies to 'input' tags that carry a name and no explicit id.
        """
        if desc.tag != 'input' or 'id' in desc.attr:
            return
        name = desc.name
        if name is not None and name in self._names:
            logger.debug("id %r assigned from label", name)
            desc.attr['id'] = name
