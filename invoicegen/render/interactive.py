from __future__ import annotations

import itertools
from pathlib import Path
from typing import Dict, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import (
    QBoxLayout,
    QFileDialog,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from invoicegen.components.primitives import Action, EditableInput, EditableTextarea, Logo, Page, Primitive, View
from invoicegen.render.base import Renderer
from invoicegen.styles.compose import StyleComposer
from invoicegen.styles.table import StyleBundle
from invoicegen.styles.themes import box_qss, bundle_to_qss, text_qss

_ALIGN = {
    "left": Qt.AlignLeft | Qt.AlignVCenter,
    "right": Qt.AlignRight | Qt.AlignVCenter,
    "center": Qt.AlignCenter,
}
_ids = itertools.count(1)


def _stretch(bundle: StyleBundle) -> int:
    """Layout stretch for a child of a row: its percentage, or its flex factor."""
    width = bundle.get("width")
    if isinstance(width, str) and width.endswith("%"):
        try:
            return max(int(float(width[:-1])), 1)
        except ValueError:
            return 0
    try:
        return int(bundle.get("flex", 0) or 0)
    except (TypeError, ValueError):
        return 0


class InteractiveRenderer(Renderer):
    """Renders primitives as Qt widgets.

    Bound leaves are recorded in ``fields`` under their ``name`` so the
    caller can push new values into the existing widgets.
    """

    pdf_mode = False

    def __init__(self, composer: Optional[StyleComposer] = None) -> None:
        super().__init__(composer)
        self.fields: Dict[str, QWidget] = {}

    # ----- helpers -----
    def _container(self, node: Primitive, bundle: StyleBundle) -> QFrame:
        frame = QFrame()
        name = f"{node.role}_{next(_ids)}"
        frame.setObjectName(name)
        frame.setProperty("role", node.role)
        frame.setStyleSheet(bundle_to_qss(bundle, f"QFrame#{name}"))
        if bundle.get("flex_direction") == "row":
            layout: QBoxLayout = QHBoxLayout(frame)
        else:
            layout = QVBoxLayout(frame)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        self.push(bundle)
        try:
            for child in getattr(node, "children", ()):
                widget = self.render(child)
                if isinstance(layout, QHBoxLayout):
                    layout.addWidget(widget, _stretch(self.style(child)))
                else:
                    layout.addWidget(widget)
        finally:
            self.pop()
        if isinstance(layout, QVBoxLayout):
            layout.addStretch(0)
        return frame

    def _decorate(self, widget: QWidget, bundle: StyleBundle) -> None:
        kind = type(widget).__name__
        widget.setStyleSheet(f"{kind} {{ {box_qss(bundle)} {text_qss(bundle)} }}")

    # ----- primitives -----
    def render_page(self, node: Page) -> QFrame:
        return self._container(node, self.style(node))

    def render_view(self, node: View) -> QFrame:
        return self._container(node, self.style(node))

    def render_input(self, node: EditableInput) -> QLineEdit:
        bundle = self.text_style(node)
        edit = QLineEdit()
        edit.setPlaceholderText(node.placeholder or "")
        edit.setText(node.text)
        edit.setAlignment(_ALIGN.get(str(bundle.get("text_align", "left")), _ALIGN["left"]))
        if node.on_change is not None:
            edit.textEdited.connect(node.on_change)
        else:
            # Display-only: the bound value is the only source of truth
            edit.setReadOnly(True)
            edit.setFocusPolicy(Qt.NoFocus)
        self._decorate(edit, bundle)
        if node.name:
            self.fields[node.name] = edit
        return edit

    def render_textarea(self, node: EditableTextarea) -> QPlainTextEdit:
        bundle = self.text_style(node)
        edit = QPlainTextEdit()
        edit.setPlaceholderText(node.placeholder or "")
        edit.setPlainText(node.text)
        line_h = edit.fontMetrics().lineSpacing()
        edit.setFixedHeight(line_h * max(node.rows, 1) + 12)
        edit.setVerticalScrollBarPolicy(Qt.ScrollBarAsNeeded)
        if node.on_change is not None:
            handler = node.on_change
            edit.textChanged.connect(lambda: handler(edit.toPlainText()))
        else:
            edit.setReadOnly(True)
        self._decorate(edit, bundle)
        if node.name:
            self.fields[node.name] = edit
        return edit

    def render_logo(self, node: Logo) -> QWidget:
        box = QWidget()
        v = QVBoxLayout(box)
        v.setContentsMargins(0, 0, 0, 0)
        label = QLabel()
        label.setObjectName("LogoImage")
        v.addWidget(label, 0, Qt.AlignLeft)
        set_logo(label, node.path, node.width)
        if node.on_change is not None:
            handler = node.on_change
            btn = QPushButton("Change logo" if node.path else "Add your logo")
            btn.setCursor(Qt.PointingHandCursor)

            def _pick() -> None:
                path, _ = QFileDialog.getOpenFileName(box, "Choose logo", "", "Images (*.png *.jpg *.jpeg *.gif *.bmp)")
                if path:
                    handler(path)

            btn.clicked.connect(_pick)
            v.addWidget(btn, 0, Qt.AlignLeft)
        if node.name:
            self.fields[node.name] = label
        return box

    def render_action(self, node: Action) -> QPushButton:
        btn = QPushButton(node.label)
        btn.setCursor(Qt.PointingHandCursor)
        btn.setProperty("role", node.class_name)
        self._decorate(btn, self.style(node))
        if node.on_click is not None:
            handler = node.on_click
            btn.clicked.connect(lambda _checked=False: handler())
        return btn


def set_logo(label: QLabel, path: str, width: int) -> None:
    """Show the image at *path* scaled to *width*, or nothing when it cannot be read."""
    pm = QPixmap(path) if path and Path(path).is_file() else QPixmap()
    if pm.isNull():
        label.clear()
        label.hide()
        return
    label.setPixmap(pm.scaledToWidth(max(int(width or pm.width()), 1), Qt.SmoothTransformation))
    label.setProperty("logoPath", path)
    label.show()


def sync_field(widget: QWidget, value: str) -> None:
    """Push a bound value into an existing widget without emitting edit signals."""
    if isinstance(widget, QLineEdit):
        if widget.text() != value:
            widget.setText(value)
    elif isinstance(widget, QPlainTextEdit):
        if widget.toPlainText() != value:
            widget.blockSignals(True)
            try:
                widget.setPlainText(value)
            finally:
                widget.blockSignals(False)
