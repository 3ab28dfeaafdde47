# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Decorators for builder shortcut methods."""

from __future__ import annotations

import inspect
from functools import wraps
from typing import Any, Callable

from .exceptions import ShapeError


def _type_label(expected: type | tuple[type, ...]) -> str:
    if isinstance(expected, tuple):
        return ' or '.join(t.__name__ for t in expected)
    return expected.__name__


def expects(**types: type | tuple[type, ...]) -> Callable:
    """Decorator to check the types of a shortcut's arguments.

    Only arguments that were actually passed are checked; defaults are
    trusted.

    Args:
        **types: Parameter name -> expected type (or tuple of types).

    Raises:
        ShapeError: At call time, if an argument has the wrong type.

    Example:
        >>> class Form(MarkupBuilder):
        ...     @expects(name=str, values=Mapping)
        ...     def choices(self, name, values):
        ...         ...
    """

    def decorator(func: Callable) -> Callable:
        signature = inspect.signature(func)
        positions = {
            name: index for index, name in enumerate(signature.parameters)
        }

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            bound = signature.bind(*args, **kwargs)
            for param, expected in types.items():
                if param not in bound.arguments:
                    continue
                value = bound.arguments[param]
                if not isinstance(value, expected):
                    # positions count 'self' as 0, so they are 1-based for callers
                    raise ShapeError(
                        f"In {func.__name__}, expected {_type_label(expected)} "
                        f"for argument {positions[param]}, {param}; got {value!r}"
                    )
            return func(*args, **kwargs)

        return wrapper

    return decorator
