# topmark:header:start
#
#   project      : Nestprint
#   file         : api.py
#   file_relpath : src/nestprint/rendering/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""High-level rendering API.

Three entry points, all backed by
[`Renderer`][nestprint.rendering.renderer.Renderer]:

* `render(value)`: return the rendering as a string;
* `write(value, sink)`: write the rendering to a text sink and return the sink;
* `shown(value)`: wrap a value so that ``str()``, ``print()`` and f-strings
  produce its rendering transparently.

Example:
    ```python
    import sys
    from nestprint import render, shown, write

    render((5, 10, 15))                   # "( 5 10 15 )"
    write({1: (1, 1)}, sys.stdout)        # prints "[ ( 1 ( 1 1 ) ) ]"
    print(f"queue = {shown([25, 50])}")   # "queue = [ 25 50 ]"
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from nestprint.rendering.renderer import Renderer

if TYPE_CHECKING:
    from nestprint.config.model import RenderConfig
    from nestprint.rendering.renderer import SinkT


def render(value: Any, config: RenderConfig | None = None) -> str:
    """Return the bracket / paren rendering of ``value``.

    Args:
        value (Any): The value to render.
        config (RenderConfig | None): Rendering options; defaults apply when None.

    Returns:
        str: The rendering.
    """
    return Renderer(config).render(value)


def write(value: Any, sink: SinkT, config: RenderConfig | None = None) -> SinkT:
    """Write the rendering of ``value`` to ``sink``.

    Args:
        value (Any): The value to render.
        sink (SinkT): Any object with a ``write(str)`` method.
        config (RenderConfig | None): Rendering options; defaults apply when None.

    Returns:
        SinkT: The sink itself, so writes can be chained.
    """
    return Renderer(config).write(value, sink)


class Shown:
    """Wrapper whose text form is the rendering of the wrapped value.

    The rendering is computed on every conversion, so it always reflects the
    current contents of the wrapped value. A format spec is applied to the
    rendered text (``f"{shown(v):>20}"`` right-aligns the rendering).
    """

    __slots__ = ("value", "config")

    def __init__(self, value: Any, config: RenderConfig | None = None) -> None:
        self.value = value
        self.config = config

    def __str__(self) -> str:
        return render(self.value, self.config)

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __repr__(self) -> str:
        return f"Shown({self.value!r})"


def shown(value: Any, config: RenderConfig | None = None) -> Shown:
    """Wrap ``value`` for transparent use with ``print()`` and f-strings."""
    return Shown(value, config)
