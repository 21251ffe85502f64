# topmark:header:start
#
#   project      : Nestprint
#   file         : renderer.py
#   file_relpath : src/nestprint/rendering/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recursive dispatch and rendering of nested values.

[`Renderer`][nestprint.rendering.renderer.Renderer] is the single dispatch
point: it classifies each value by its class and hands it to the native
scalar formatter, the tuple renderer or the sequence renderer. The tuple and
sequence renderers re-enter the dispatch for every nested element, so tuples
of sequences, sequences of tuples, mappings of adapters and so on render
recursively.

The whole value is rendered into a buffer first; the sink is written only
once rendering succeeded, so an unsupported element deep inside a value
never leaves partial output behind.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar

from nestprint.config.logging import get_logger
from nestprint.config.model import RenderConfig
from nestprint.core.capability import Capability, classify
from nestprint.core.scalars import ScalarFormatter
from nestprint.core.tuples import iter_positions
from nestprint.errors import NestingTooDeepError, RecursiveStructureError, UnsupportedTypeError
from nestprint.rendering.formats import ELEMENT_SEPARATOR, Delimiters

if TYPE_CHECKING:
    from collections.abc import Iterator

    from nestprint.core.capability import Classification

logger = get_logger(__name__)


class TextSink(Protocol):
    """Anything text can be written to (``io.StringIO``, ``sys.stdout``, open files)."""

    def write(self, text: str, /) -> Any:
        """Write ``text`` to the sink."""
        ...


SinkT = TypeVar("SinkT", bound=TextSink)


class Renderer:
    """Render values into the bracket / paren text form.

    Args:
        config (RenderConfig | None): Rendering options. Defaults to `RenderConfig()`.
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config: RenderConfig = config or RenderConfig()
        self._scalars = ScalarFormatter(self.config.float_format)

    def render(self, value: Any) -> str:
        """Return the rendering of ``value``.

        Raises:
            UnsupportedTypeError: If ``value`` or a nested element cannot be rendered.
            RecursiveStructureError: If a container contains itself.
            NestingTooDeepError: If nesting exceeds ``config.max_depth``, or the
                interpreter's recursion limit when no ``max_depth`` stops it earlier.
        """
        logger.trace("rendering value of type %s", type(value).__qualname__)
        out: list[str] = []
        try:
            self._dispatch(value, out, location="$", depth=0, active=set())
        except RecursionError as exc:
            raise NestingTooDeepError(None) from exc
        return "".join(out)

    def write(self, value: Any, sink: SinkT) -> SinkT:
        """Write the rendering of ``value`` to ``sink`` and return the sink.

        Nothing is written when rendering fails.
        """
        sink.write(self.render(value))
        return sink

    def _dispatch(
        self,
        value: Any,
        out: list[str],
        *,
        location: str,
        depth: int,
        active: set[int],
    ) -> None:
        classification: Classification = classify(type(value))
        match classification.capability:
            case Capability.NATIVE:
                out.append(self._scalars.format(value))
                return
            case Capability.UNSUPPORTED:
                raise UnsupportedTypeError(
                    type(value),
                    classification.reason,
                    rule=classification.rule,
                    location=location,
                    hint=classification.hint,
                )

        marker: int = id(value)
        if marker in active:
            raise RecursiveStructureError(type(value), location=location)
        max_depth: int | None = self.config.max_depth
        if max_depth is not None and depth >= max_depth:
            raise NestingTooDeepError(max_depth, location=location)

        active.add(marker)
        try:
            if classification.capability is Capability.TUPLE:
                self._render_tuple(value, out, location=location, depth=depth + 1, active=active)
            elif classification.traverse is None:
                raise UnsupportedTypeError(
                    type(value),
                    "sequence classification names no traversal accessor",
                    rule=classification.rule,
                    location=location,
                )
            else:
                self._render_sequence(
                    classification.traverse(value),
                    out,
                    location=location,
                    depth=depth + 1,
                    active=active,
                )
        finally:
            active.discard(marker)

    def _render_tuple(
        self,
        value: Any,
        out: list[str],
        *,
        location: str,
        depth: int,
        active: set[int],
    ) -> None:
        out.append(Delimiters.TUPLE.opening)
        for index, item in enumerate(iter_positions(value)):
            self._dispatch(item, out, location=f"{location}({index})", depth=depth, active=active)
            out.append(ELEMENT_SEPARATOR)
        out.append(Delimiters.TUPLE.closing)

    def _render_sequence(
        self,
        elements: Iterator[Any],
        out: list[str],
        *,
        location: str,
        depth: int,
        active: set[int],
    ) -> None:
        out.append(Delimiters.SEQUENCE.opening)
        for index, item in enumerate(elements):
            self._dispatch(item, out, location=f"{location}[{index}]", depth=depth, active=active)
            out.append(ELEMENT_SEPARATOR)
        out.append(Delimiters.SEQUENCE.closing)

