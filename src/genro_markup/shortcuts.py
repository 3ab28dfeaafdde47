# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Form shortcuts for MarkupBuilder.

Each shortcut expands into one or more plain tag generations, checking
its own arguments first.

Example:
    >>> b = MarkupBuilder(RecordSource({'car': 'saab'}))
    >>> b.radio('car', {}, {'volvo': 'Volvo', 'saab': 'Saab'})
    >>> b.compact()
    '<input name="car" type="radio" value="volvo">Volvo</input><input name="car" type="radio" value="saab" checked="true">Saab</input>'
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Callable, TYPE_CHECKING

from .decorators import expects
from .exceptions import ShapeError
from .render import format_value
from .shapes import Name

if TYPE_CHECKING:
    from .source import DataSource


class FormShortcutsMixin:
    """Checkbox, radio, select, submit and link shortcuts.

    Expects the host class to provide ``source`` and ``generate()``.
    """

    source: DataSource | None
    generate: Callable[..., None]

    def _field_data(self, name: str) -> Any:
        """Return the bound value of a field, or None."""
        if self.source is None:
            return None
        return self.source.lookup(name)

    @expects(name=str, opts=Mapping, values=Mapping)
    def checkbox(self, name: str, opts: Mapping[str, Any], values: Mapping[Any, str]) -> None:
        """Emit one checkbox input per value, named name[1], name[2], ...

        A box is checked when the bound field contains its value. The
        field may be a comma-separated string, a list, or a mapping
        (whose values are used).

        Args:
            name: Base name of the controls.
            opts: Attributes shared by all boxes.
            values: value -> caption pairs.
        """
        data = self._field_data(name)
        if isinstance(data, str):
            checked = data.split(',')
        elif isinstance(data, Mapping):
            checked = list(data.values())
        elif isinstance(data, Sequence):
            checked = list(data)
        else:
            checked = []

        for n, (value, caption) in enumerate(values.items(), start=1):
            attr = dict(opts)
            attr['name'] = Name(f"{name}[{n}]")
            attr['type'] = 'checkbox'
            attr['value'] = value
            attr['text'] = caption
            if str(value) in checked:
                attr['checked'] = 'true'
            self.generate('input', attr)

    @expects(name=str, opts=Mapping, values=Mapping)
    def radio(self, name: str, opts: Mapping[str, Any], values: Mapping[Any, str]) -> None:
        """Emit one radio input per value, all sharing the same name.

        The button whose value equals the bound field is checked.
        """
        data = self._field_data(name)
        for value, caption in values.items():
            attr = dict(opts)
            attr['name'] = Name(name)
            attr['type'] = 'radio'
            attr['value'] = value
            attr['text'] = caption
            if data == str(value):
                attr['checked'] = 'true'
            self.generate('input', attr)

    @expects(name=str, opts=Mapping, values=Mapping)
    def select(self, name: str, opts: Mapping[str, Any], values: Mapping[Any, str]) -> None:
        """Emit a select with one option per value.

        The option whose value equals the bound field is selected.
        """
        data = self._field_data(name)
        attr: dict[str, Any] = {'name': Name(name)}
        attr.update(opts)

        def options(builder: Any) -> None:
            for value, caption in values.items():
                option: dict[str, Any] = {'value': value}
                if data == str(value):
                    option['selected'] = 'true'
                option['text'] = caption
                builder.generate('option', [option])

        self.generate('select', attr, options)

    @expects(text=str, opts=(Mapping, type(None)))
    def submit(self, text: str, opts: Mapping[str, Any] | None = None) -> None:
        """Emit a submit button showing text."""
        attr: dict[str, Any] = {'type': 'submit', 'value': text}
        if opts:
            attr.update(opts)
        self.generate('input', attr)

    @expects(text=str, opts=(Mapping, type(None)), params=(Mapping, type(None)))
    def alink(
        self,
        text: str,
        opts: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> None:
        """Emit an <a> link.

        Args:
            text: The link caption.
            opts: Attributes; 'href' is required.
            params: Optional query parameters appended to href as ?k=v&k=v.

        Raises:
            ShapeError: If opts has no href.
        """
        opts = opts or {}
        if opts.get('href') is None:
            raise ShapeError("In alink, expected an href option in opts")

        href = format_value(opts['href'])
        if params:
            query = '&'.join(f"{k}={format_value(v)}" for k, v in params.items())
            href = f"{href}?{query}"

        attr = {k: v for k, v in opts.items() if k != 'href'}
        attr['href'] = href
        attr['text'] = text
        self.generate('a', attr)
