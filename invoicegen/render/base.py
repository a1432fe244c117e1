from __future__ import annotations

from typing import Any, Dict, List, Optional

from invoicegen.components.primitives import (
    Action,
    EditableInput,
    EditableTextarea,
    Logo,
    Page,
    Primitive,
    View,
)
from invoicegen.styles.compose import StyleComposer, default_composer
from invoicegen.styles.table import StyleBundle

# Attributes that flow from a container to the text inside it
INHERITED_KEYS = ("color", "font_size", "font_weight", "text_align")


class Renderer:
    """Turns a primitive tree into output for one mode.

    Subclasses implement one ``render_*`` method per primitive. Text
    attributes set on a container are inherited by its descendants unless
    they set their own.
    """

    pdf_mode: bool = False

    def __init__(self, composer: Optional[StyleComposer] = None) -> None:
        self.composer = composer or default_composer()
        self._inherited: List[Dict[str, object]] = [{}]

    def style(self, node: Primitive) -> StyleBundle:
        return self.composer.compose(node.tokens(screen=not self.pdf_mode))

    def text_style(self, node: Primitive) -> StyleBundle:
        """Own bundle layered over whatever the enclosing containers set."""
        return {**self._inherited[-1], **self.style(node)}

    def push(self, bundle: StyleBundle) -> None:
        merged = dict(self._inherited[-1])
        merged.update({k: v for k, v in bundle.items() if k in INHERITED_KEYS})
        self._inherited.append(merged)

    def pop(self) -> None:
        self._inherited.pop()

    def render(self, node: Primitive) -> Any:
        # Textarea before input: it is a subclass
        if isinstance(node, Page):
            return self.render_page(node)
        if isinstance(node, View):
            return self.render_view(node)
        if isinstance(node, EditableTextarea):
            return self.render_textarea(node)
        if isinstance(node, EditableInput):
            return self.render_input(node)
        if isinstance(node, Logo):
            return self.render_logo(node)
        if isinstance(node, Action):
            return self.render_action(node)
        raise TypeError(f"Cannot render {type(node).__name__}")

    def render_page(self, node: Page) -> Any:
        raise NotImplementedError

    def render_view(self, node: View) -> Any:
        raise NotImplementedError

    def render_input(self, node: EditableInput) -> Any:
        raise NotImplementedError

    def render_textarea(self, node: EditableTextarea) -> Any:
        return self.render_input(node)

    def render_logo(self, node: Logo) -> Any:
        raise NotImplementedError

    def render_action(self, node: Action) -> Any:
        raise NotImplementedError


def renderer_for(pdf_mode: bool, composer: Optional[StyleComposer] = None) -> Renderer:
    """Resolve the mode flag to a concrete renderer."""
    if pdf_mode:
        from invoicegen.render.document import DocumentRenderer

        return DocumentRenderer(composer)
    from invoicegen.render.interactive import InteractiveRenderer

    return InteractiveRenderer(composer)
