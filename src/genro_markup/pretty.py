# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Pretty printer for a builder's output buffer.

Each buffered unit is classified by its textual shape and printed on its
own line, indented by the number of currently open tags. Classification
works on the rendered strings, so a text value that itself looks like a
tag (e.g. 'a <b>') can shift the indentation. Tag content is never changed.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterable


BEGIN_MARKER = '<!-- begin generated output -->'
END_MARKER = '<!-- end generated output -->'

# Patterns are tried in order; a unit matches if any of its lines does.
_CLOSE_PATTERN = re.compile(r'^</.*>$', re.MULTILINE)
_BALANCED_PATTERN = re.compile(r'^<.*</.*>$', re.MULTILINE)
_VOID_PATTERN = re.compile(r'^<.*/>$', re.MULTILINE)
_OPEN_PATTERN = re.compile(r'^<.*>$', re.MULTILINE)


class UnitKind(Enum):
    """Shape of one output unit."""

    CLOSE = 'close'
    BALANCED = 'balanced'
    VOID = 'void'
    OPEN = 'open'
    OTHER = 'other'


def classify_unit(unit: str) -> UnitKind:
    """Return the shape of a rendered unit.

    Examples:
        >>> classify_unit('</div>')
        <UnitKind.CLOSE: 'close'>
        >>> classify_unit('<p>ABC</p>')
        <UnitKind.BALANCED: 'balanced'>
        >>> classify_unit('<br />')
        <UnitKind.VOID: 'void'>
        >>> classify_unit('<div class="x">')
        <UnitKind.OPEN: 'open'>
        >>> classify_unit('plain text')
        <UnitKind.OTHER: 'other'>
    """
    if _CLOSE_PATTERN.search(unit):
        return UnitKind.CLOSE
    if _BALANCED_PATTERN.search(unit):
        return UnitKind.BALANCED
    if _VOID_PATTERN.search(unit):
        return UnitKind.VOID
    if _OPEN_PATTERN.search(unit):
        return UnitKind.OPEN
    return UnitKind.OTHER


def prettify(
    units: Iterable[str],
    indent_unit: str = ' ',
    begin_marker: str = BEGIN_MARKER,
    end_marker: str = END_MARKER,
) -> str:
    """Render units one per line with nesting indentation.

    Args:
        units: The buffered output units, in order.
        indent_unit: String repeated once per nesting level.
        begin_marker: First line of the output.
        end_marker: Last line of the output.

    Returns:
        The formatted text, ending with a newline.
    """
    level = 0
    lines = [begin_marker]
    for unit in units:
        kind = classify_unit(unit)
        if kind is UnitKind.CLOSE:
            level = max(level - 1, 0)
        lines.append(f"{indent_unit * level}{unit}")
        if kind is UnitKind.OPEN:
            level += 1
    lines.append(end_marker)
    return '\n'.join(lines) + '\n'
