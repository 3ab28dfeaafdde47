# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Bound data sources.

A data source supplies field values and per-field validation messages to
a MarkupBuilder. Anything implementing the DataSource protocol can be
bound directly; plain mappings and model objects that carry an ``errors``
mapping are wrapped by as_source().

Example:
    >>> record = RecordSource({'username': 'bobama'})
    >>> record.errors['username'] = ['Username already used.']
    >>> record.lookup('username')
    'bobama'
    >>> record.errors_for('username')
    ['Username already used.']
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from .exceptions import ConstructionError


@runtime_checkable
class DataSource(Protocol):
    """Capability consumed by the builder: field lookup plus field errors."""

    def lookup(self, name: str) -> Any:
        """Return the value of a field, or None if absent."""
        ...

    def errors_for(self, name: str) -> list[str] | None:
        """Return the validation messages of a field, or None."""
        ...


class RecordSource:
    """Dict-backed data source.

    Values are read and written with item access, errors through the
    ``errors`` dict.

    Example:
        >>> record = RecordSource()
        >>> record['a_button'] = 'Push Me'
        >>> record.lookup('a_button')
        'Push Me'
    """

    def __init__(
        self,
        values: Mapping[str, Any] | None = None,
        errors: Mapping[str, list[str]] | None = None,
    ) -> None:
        self.values: dict[str, Any] = dict(values or {})
        self.errors: dict[str, list[str]] = dict(errors or {})

    def __repr__(self) -> str:
        return f"RecordSource({self.values!r}, errors={self.errors!r})"

    def __getitem__(self, name: str) -> Any:
        return self.values[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self.values[name] = value

    def __contains__(self, name: object) -> bool:
        return name in self.values

    def lookup(self, name: str) -> Any:
        return self.values.get(name)

    def errors_for(self, name: str) -> list[str] | None:
        return self.errors.get(name)


class MappingSource:
    """Adapter for a mapping that also carries an ``errors`` mapping attribute."""

    def __init__(self, mapping: Mapping[str, Any]) -> None:
        self._mapping = mapping

    def lookup(self, name: str) -> Any:
        return self._mapping.get(name)

    def errors_for(self, name: str) -> list[str] | None:
        return self._mapping.errors.get(name)  # type: ignore[attr-defined]


class ModelSource:
    """Adapter for a model object whose fields are attributes.

    The object must carry an ``errors`` mapping, as validated ORM models do.
    """

    def __init__(self, model: Any) -> None:
        self._model = model

    def lookup(self, name: str) -> Any:
        return getattr(self._model, str(name), None)

    def errors_for(self, name: str) -> list[str] | None:
        return self._model.errors.get(name)


def _has_error_mapping(obj: Any) -> bool:
    return isinstance(getattr(obj, 'errors', None), Mapping)


def as_source(obj: Any) -> DataSource | None:
    """Return a DataSource for obj.

    Args:
        obj: None, a DataSource, or a mapping/model with an ``errors`` mapping.

    Raises:
        ConstructionError: If obj exposes no per-field error mapping.
    """
    if obj is None:
        return None
    if isinstance(obj, DataSource):
        return obj
    if _has_error_mapping(obj):
        if isinstance(obj, Mapping):
            return MappingSource(obj)
        return ModelSource(obj)
    raise ConstructionError(
        f"The data source {type(obj).__name__!r} must provide errors_for() "
        "or an 'errors' mapping"
    )
