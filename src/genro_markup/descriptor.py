# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Canonical tag descriptor."""

from __future__ import annotations

from typing import Any

from .exceptions import TextTypeError


class TagDescriptor:
    """The normalized form every tag call reduces to.

    Each descriptor has:
    - tag: The tag name ('input', 'div', ...)
    - attr: Attributes, rendered in insertion order
    - text: Text segments placed between the opening and closing tag
    - has_content: True if a nested-content producer was supplied

    Example:
        >>> desc = TagDescriptor('label', {'for': 'user', 'text': 'User'})
        >>> desc.extract_text()
        >>> desc.attr
        {'for': 'user'}
        >>> desc.text
        ['User']
    """

    __slots__ = ('tag', 'attr', 'text', 'has_content')

    def __init__(
        self,
        tag: str,
        attr: dict[str, Any] | None = None,
        text: list[str] | None = None,
        has_content: bool = False,
    ) -> None:
        """Initialize a TagDescriptor.

        Args:
            tag: The tag name.
            attr: Optional dictionary of attributes.
            text: Optional list of text segments.
            has_content: Whether a content producer will fill the tag.
        """
        self.tag = tag
        self.attr = attr if attr is not None else {}
        self.text = text if text is not None else []
        self.has_content = has_content

    def __repr__(self) -> str:
        return (
            f"TagDescriptor({self.tag!r}, attr={self.attr!r}, "
            f"text={self.text!r}, has_content={self.has_content!r})"
        )

    @property
    def name(self) -> Any:
        """The 'name' attribute, or None."""
        return self.attr.get('name')

    def extract_text(self) -> None:
        """Move the 'text' attribute into the text segment list.

        Raises:
            TextTypeError: If the value is not a str or a list/tuple of str.
        """
        text = self.attr.pop('text', None)
        if text is None:
            self.text = []
        elif isinstance(text, str):
            self.text = [text]
        elif isinstance(text, (list, tuple)) and all(isinstance(t, str) for t in text):
            self.text = list(text)
        else:
            raise TextTypeError(
                f"In {self.tag!r}, expected str or list of str for text, "
                f"got {text!r}"
            )
