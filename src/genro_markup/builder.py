# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""MarkupBuilder - Generate markup from tag calls."""

from __future__ import annotations

import logging
import sys
import threading
from collections.abc import Mapping, Sequence
from contextlib import contextmanager
from typing import Any, Callable, Iterator

from .annotator import FIELD_TAGS, WARNING_TEMPLATE, annotate
from .binding import bind_value
from .exceptions import MarkupError, RecursionOverflowError, ShapeError
from .labels import LabelRegistry
from .pretty import BEGIN_MARKER, END_MARKER, prettify
from .render import close_tag, open_tag, text_tag, void_tag
from .shapes import normalize
from .shortcuts import FormShortcutsMixin
from .source import DataSource, as_source

logger = logging.getLogger(__name__)

Content = Callable[['MarkupBuilder'], Any]

# Python frames per nesting level: generate, tag method, element, producer, slack
_FRAMES_PER_LEVEL = 6

# The recursion limit is process-wide: concurrent renders share one raise,
# and only the last render to finish restores the saved limit.
_limit_lock = threading.Lock()
_active_renders = 0
_saved_limit = 0


@contextmanager
def _recursion_headroom(frames: int) -> Iterator[None]:
    """Keep the recursion limit at least `frames` above its saved value."""
    global _active_renders, _saved_limit
    with _limit_lock:
        if _active_renders == 0:
            _saved_limit = sys.getrecursionlimit()
        _active_renders += 1
        needed = _saved_limit + frames
        if sys.getrecursionlimit() < needed:
            sys.setrecursionlimit(needed)
    try:
        yield
    finally:
        with _limit_lock:
            _active_renders -= 1
            if _active_renders == 0:
                sys.setrecursionlimit(_saved_limit)


class MarkupBuilder(FormShortcutsMixin):
    """Builds markup from tag calls into an ordered output buffer.

    Any attribute that is not a real method is a tag: ``builder.div(...)``
    emits a div. Each call appends one or more complete units to the
    buffer; read the result with compact() or pretty().

    If a data source is bound, named fields take their value from it and
    invalid fields are followed by a warning note.

    Usage:
        >>> record = RecordSource({'username': 'bobama'})
        >>> b = MarkupBuilder(record)
        >>> b.label(Name('username'), 'Username')
        >>> b.text(Name('username'), size=20)
        >>> b.compact()
        '<label for="username">Username</label><input name="username" size="20" type="text" value="bobama" id="username" />'

    Nested content is produced by a callable receiving the builder:
        >>> b.clear().div(class_='box', _content=lambda b: b.br())
        >>> b.compact()
        '<div class="box"><br /></div>'

    Attributes:
        MAX_DEPTH: Nesting depth above which generation is aborted.
        FIELD_TAGS: Tags that receive error annotations.
        MULTILINE_TAGS: Tags bound through their text, never self-closed.
        INPUT_LIKE_TAGS: Tag names that emit an input of that type.
        WARNING_TEMPLATE: Format of an error annotation ({message}).
        BEGIN_MARKER: First line of pretty() output.
        END_MARKER: Last line of pretty() output.
    """

    MAX_DEPTH: int = 500
    FIELD_TAGS: frozenset[str] = FIELD_TAGS
    MULTILINE_TAGS: frozenset[str] = frozenset({'textarea'})
    INPUT_LIKE_TAGS: frozenset[str] = frozenset({
        'button', 'color', 'date', 'datetime_local', 'email', 'hidden',
        'image', 'month', 'number', 'password', 'range', 'reset', 'search',
        'submit', 'tel', 'text', 'time', 'url', 'week',
    })
    WARNING_TEMPLATE: str = WARNING_TEMPLATE
    BEGIN_MARKER: str = BEGIN_MARKER
    END_MARKER: str = END_MARKER

    def __init__(
        self,
        source: Any = None,
        user: Any = None,
        content: Content | None = None,
    ) -> None:
        """Initialize a MarkupBuilder.

        Args:
            source: Optional data source. A DataSource, or a mapping or model
                object carrying an ``errors`` mapping (see as_source()).
            user: Opaque value kept for the caller; never used here.
            content: Optional callable run immediately with the new builder.

        Raises:
            ConstructionError: If source has no per-field error mapping.
        """
        self._source: DataSource | None = as_source(source)
        self._user = user
        self._depth = 0
        self._out: list[str] = []
        self._labels = LabelRegistry()
        if content is not None:
            content(self)

    @classmethod
    def build(
        cls,
        source: Any = None,
        pretty: bool = False,
        user: Any = None,
        content: Content | None = None,
    ) -> str:
        """Create a builder, run content on it and return the markup.

        Args:
            source: Optional data source.
            pretty: If True return pretty() output, else compact().
            user: Opaque caller value.
            content: Callable receiving the builder.
        """
        builder = cls(source, user, content)
        return builder.pretty() if pretty else builder.compact()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(units={len(self._out)})"

    def __str__(self) -> str:
        return self.compact()

    @property
    def out(self) -> tuple[str, ...]:
        """Snapshot of the output buffer."""
        return tuple(self._out)

    @property
    def source(self) -> DataSource | None:
        """The bound data source."""
        return self._source

    @property
    def user(self) -> Any:
        """The caller's opaque value."""
        return self._user

    @property
    def labels(self) -> LabelRegistry:
        """Field names that received a label."""
        return self._labels

    @property
    def depth(self) -> int:
        """Current nesting depth."""
        return self._depth

    def clear(self) -> MarkupBuilder:
        """Reset buffer and labels; keep source and user.

        Only valid between renders, never from inside a content producer.

        Returns:
            The builder itself, for chaining.

        Raises:
            MarkupError: If called while a tag is being generated.
        """
        if self._depth != 0:
            raise MarkupError(
                f"clear() called during generation at depth {self._depth}"
            )
        logger.debug("clearing %d buffered units", len(self._out))
        self._out = []
        self._labels.clear()
        return self

    # ------------------------------------------------------------------
    # Tag dispatch
    # ------------------------------------------------------------------

    def __getattr__(self, name: str) -> Callable[..., None]:
        """Return a tag method for any name that is not a real attribute.

        Raises:
            AttributeError: For private names.
        """
        if name.startswith('_'):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )
        return self._make_tag_method(name)

    def _make_tag_method(self, tag: str) -> Callable[..., None]:
        """Create a method emitting a specific tag."""

        def tag_method(*args: Any, _content: Content | None = None, **attr: Any) -> None:
            self.element(tag, *args, _content=_content, **attr)

        tag_method.__name__ = tag
        return tag_method

    def element(
        self,
        tag: str,
        *args: Any,
        _content: Content | None = None,
        **attr: Any,
    ) -> None:
        """Emit a tag from positional arguments and keyword attributes.

        Keyword attributes are appended as a trailing mapping, with a final
        underscore dropped from their names (class_ -> class). Input-like
        names (text, password, ...) emit an input of that type.

        Use this for tags whose name clashes with a builder method:
            >>> builder.element('select', Name('car'), _content=options)

        Args:
            tag: The tag name.
            *args: Positional arguments (see shapes.normalize()).
            _content: Optional nested-content producer.
            **attr: Attributes.
        """
        bundle: list[Any] = list(args)
        if attr:
            bundle.append({_attr_name(k): v for k, v in attr.items()})

        if tag in self.INPUT_LIKE_TAGS:
            if not bundle or not isinstance(bundle[-1], Mapping):
                bundle.append({})
            else:
                bundle[-1] = dict(bundle[-1])
            bundle[-1]['type'] = tag
            tag = 'input'

        self.generate(tag, bundle, _content)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    @contextmanager
    def _nesting(self, tag: str) -> Iterator[None]:
        """Track nesting depth for one generate() call.

        The outermost call holds recursion headroom for the duration of the
        render, so that MAX_DEPTH levels of tag methods and content
        producers fit. The limit is restored when no render is active.
        """
        if self._depth == 0:
            with _recursion_headroom(self.MAX_DEPTH * _FRAMES_PER_LEVEL):
                with self._level(tag):
                    yield
        else:
            with self._level(tag):
                yield

    @contextmanager
    def _level(self, tag: str) -> Iterator[None]:
        self._depth += 1
        try:
            if self._depth > self.MAX_DEPTH:
                logger.debug("depth %d exceeded on %r", self.MAX_DEPTH, tag)
                raise RecursionOverflowError(tag, self._out)
            yield
        finally:
            self._depth -= 1

    def generate(
        self,
        tag: str,
        args: Mapping[str, Any] | Sequence[Any] = (),
        content: Content | None = None,
    ) -> None:
        """Generate one tag and append its unit(s) to the buffer.

        Args:
            tag: The tag name, emitted as given.
            args: Attribute mapping, or positional arguments
                (see shapes.normalize()).
            content: Optional callable producing nested content. It receives
                the builder; a str it returns is appended as a unit.

        Raises:
            ShapeError: If args match no call shape or content is not callable.
            TextTypeError: If the text attribute is malformed.
            RecursionOverflowError: If nesting exceeds MAX_DEPTH.
        """
        with self._nesting(tag):
            if content is not None and not callable(content):
                raise ShapeError(
                    f"Content for tag {tag!r} must be callable, got {content!r}"
                )

            desc = normalize(tag, args, self._labels)
            desc.has_content = content is not None
            bind_value(desc, self._source, self.MULTILINE_TAGS)
            self._labels.correlate(desc)
            desc.extract_text()

            if tag in self.MULTILINE_TAGS and not desc.text and not desc.has_content:
                desc.text = ['']

            message = annotate(
                desc, self._source, self.FIELD_TAGS, self.WARNING_TEMPLATE
            )

            if desc.text:
                self._out.append(text_tag(tag, desc.attr, desc.text) + message)
            elif content is not None:
                self._out.append(open_tag(tag, desc.attr))
                result = content(self)
                if isinstance(result, str):
                    self._out.append(result)
                self._out.append(close_tag(tag) + message)
            else:
                self._out.append(void_tag(tag, desc.attr) + message)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def compact(self) -> str:
        """Return the buffered units concatenated, without added whitespace."""
        return ''.join(self._out)

    def pretty(self, indent_unit: str = ' ') -> str:
        """Return the buffered units one per line, indented by nesting.

        Args:
            indent_unit: String repeated once per nesting level.
        """
        return prettify(
            self._out,
            indent_unit=indent_unit,
            begin_marker=self.BEGIN_MARKER,
            end_marker=self.END_MARKER,
        )


def _attr_name(key: str) -> str:
    """Map a keyword argument to an attribute name (class_ -> class)."""
    if key.endswith('_') and len(key) > 1:
        return key[:-1]
    return key
