# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Markup builder exceptions."""

from __future__ import annotations

from typing import Sequence


class MarkupError(Exception):
    """Base exception for markup builder errors."""

    pass


class ShapeError(MarkupError):
    """Raised when a call's arguments match no recognized call shape."""

    pass


class TextTypeError(MarkupError):
    """Raised when a text value is neither a string nor a list of strings."""

    pass


class ConstructionError(MarkupError):
    """Raised when a data source lacks the per-field error mapping."""

    pass


class ErrorListTypeError(MarkupError):
    """Raised when a data source reports field errors that are not a list."""

    pass


class RecursionOverflowError(MarkupError):
    """Raised when tag generation nests deeper than the builder allows.

    Attributes:
        tag: The tag being generated when the ceiling was crossed.
        buffer: Snapshot of the output accumulated so far.
    """

    def __init__(self, tag: str, buffer: Sequence[str]) -> None:
        self.tag = tag
        self.buffer = tuple(buffer)
        super().__init__(f"looping on {tag!r}, out={list(self.buffer)!r}")
