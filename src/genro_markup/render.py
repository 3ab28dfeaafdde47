# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""String rendering of tags and attributes.

No escaping is performed: values are written as given.
"""

from __future__ import annotations

from typing import Any, Mapping


def format_value(value: Any) -> str:
    """Coerce an attribute value to its string form."""
    if value is None:
        return ''
    if value is True:
        return 'true'
    if value is False:
        return 'false'
    return str(value)


def format_attrs(attr: Mapping[str, Any]) -> str:
    """Render attributes as ' key="value"' pairs in insertion order."""
    return ''.join(f' {k}="{format_value(v)}"' for k, v in attr.items())


def open_tag(tag: str, attr: Mapping[str, Any]) -> str:
    return f"<{tag}{format_attrs(attr)}>"


def close_tag(tag: str) -> str:
    return f"</{tag}>"


def void_tag(tag: str, attr: Mapping[str, Any]) -> str:
    return f"<{tag}{format_attrs(attr)} />"


def text_tag(tag: str, attr: Mapping[str, Any], text: list[str]) -> str:
    """Render a tag enclosing text segments joined by newlines."""
    body = '\n'.join(text)
    return f"{open_tag(tag, attr)}{body}{close_tag(tag)}"
