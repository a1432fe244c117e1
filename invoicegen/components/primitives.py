from __future__ import annotations

"""Dual-mode building blocks of the invoice layout.

Each primitive is plain data. ``render(pdf_mode)`` hands it to the renderer
for that mode: ReportLab flowables when ``pdf_mode`` is true, Qt widgets
otherwise. Containers carry their children; leaves carry the bound value and
an optional change handler.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, List, Optional, Union

ChangeHandler = Callable[[str], None]


@dataclass
class Primitive:
    class_name: str = ""

    role = ""
    # Role used on screen when it differs from the document role
    screen_role = ""

    def tokens(self, screen: bool = False) -> str:
        """Role token first, modifiers after it."""
        role = self.screen_role if screen and self.screen_role else self.role
        return f"{role} {self.class_name or ''}".strip()

    def render(self, pdf_mode: bool = False, renderer: Any = None) -> Any:
        if renderer is None:
            from invoicegen.render.base import renderer_for  # local import to avoid cycles

            renderer = renderer_for(pdf_mode)
        return renderer.render(self)


@dataclass
class Page(Primitive):
    children: List[Primitive] = field(default_factory=list)

    role = "page"


@dataclass
class View(Primitive):
    children: List[Primitive] = field(default_factory=list)

    role = "view"


@dataclass
class EditableInput(Primitive):
    placeholder: str = ""
    value: Any = None
    on_change: Optional[ChangeHandler] = None
    # Identifies the bound slot so an on-screen form can be refreshed in place
    name: str = ""

    role = "span"
    screen_role = "input"

    @property
    def text(self) -> str:
        return "" if self.value is None else str(self.value)


@dataclass
class EditableTextarea(EditableInput):
    rows: int = 2


@dataclass
class Logo(Primitive):
    path: str = ""
    width: int = 0
    on_change: Optional[ChangeHandler] = None
    name: str = ""

    role = "logo"


@dataclass
class Action(Primitive):
    """On-screen button. Has no counterpart in the document."""

    label: str = ""
    on_click: Optional[Callable[[], None]] = None

    role = "button"


def iter_fields(node: Primitive) -> Iterator[Union[EditableInput, Logo]]:
    """Depth-first walk over the bound leaves of *node*."""
    if isinstance(node, (EditableInput, Logo)):
        yield node
    for child in getattr(node, "children", ()):
        yield from iter_fields(child)
