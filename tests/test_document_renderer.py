from __future__ import annotations

from reportlab.lib.enums import TA_RIGHT
from reportlab.platypus import Paragraph, Spacer, Table

from invoicegen.components.invoice_page import invoice_page
from invoicegen.components.primitives import Action, EditableInput, EditableTextarea, Logo, Page, View, iter_fields
from invoicegen.data.models import initial_invoice
from invoicegen.render.base import renderer_for
from invoicegen.render.document import DocumentPage, DocumentRenderer
from invoicegen.styles.compose import StyleComposer
from invoicegen.styles.table import STYLE_TABLE

BARE = StyleComposer({})


def test_field_renders_static_text() -> None:
    out = EditableInput(value=42).render(True, DocumentRenderer(BARE))
    assert len(out) == 1
    assert isinstance(out[0], Paragraph)
    assert out[0].getPlainText() == "42"


def test_missing_value_renders_empty_text() -> None:
    out = EditableInput(placeholder="Your Company").render(True, DocumentRenderer(BARE))
    assert out[0].getPlainText() == ""


def test_markup_characters_are_escaped() -> None:
    out = EditableInput(value="A & B <c>").render(True, DocumentRenderer(BARE))
    assert out[0].getPlainText() == "A & B <c>"


def test_textarea_keeps_line_breaks() -> None:
    renderer = DocumentRenderer(BARE)
    multi = EditableTextarea(value="one\ntwo").render(True, renderer)[0]
    single = EditableInput(value="one\ntwo").render(True, renderer)[0]
    _w, h_multi = multi.wrap(500, 500)
    _w, h_single = single.wrap(500, 500)
    assert h_multi == 2 * h_single


def test_span_padding_becomes_indents_and_spacers() -> None:
    out = EditableInput(value="x").render(True)
    span = STYLE_TABLE["span"]
    assert [type(f) for f in out] == [Spacer, Paragraph, Spacer]
    assert out[0].height == span["padding_top"]
    assert out[2].height == span["padding_bottom"]
    assert out[1].style.rightIndent == span["padding_right"]
    assert out[1].style.leftIndent == span["padding_left"]


def test_background_still_boxes_content() -> None:
    composer = StyleComposer({"bg": {"background_color": "#eeeeee", "padding_top": 5}})
    out = View(class_name="bg", children=[EditableInput(value="x")]).render(True, DocumentRenderer(composer))
    assert len(out) == 1
    assert isinstance(out[0], Table)


def test_bordered_row_is_decorated_in_place() -> None:
    composer = StyleComposer({"flex": {"flex_direction": "row"}, "row": {"border_bottom_width": 1}})
    out = View(class_name="row flex", children=[EditableInput(value="a"), EditableInput(value="b")]).render(
        True, DocumentRenderer(composer)
    )
    assert len(out) == 1
    assert isinstance(out[0], Table)
    assert len(out[0]._cellvalues[0]) == 2


def test_screen_tokens_use_input_role() -> None:
    field = EditableInput(class_name="bold")
    assert field.tokens() == "span bold"
    assert field.tokens(screen=True) == "input bold"
    assert View(class_name="flex").tokens(screen=True) == "view flex"


def test_margins_become_spacers() -> None:
    composer = StyleComposer({"mt": {"margin_top": 12}, "mb": {"margin_bottom": 3}})
    out = View(class_name="mt mb", children=[EditableInput(value="x")]).render(True, DocumentRenderer(composer))
    assert isinstance(out[0], Spacer) and out[0].height == 12
    assert isinstance(out[-1], Spacer) and out[-1].height == 3


def test_row_view_splits_width_by_percentages() -> None:
    composer = StyleComposer({"flex": {"flex_direction": "row"}, "w-25": {"width": "25%"}})
    renderer = DocumentRenderer(composer, page_size=(400, 400))
    page = Page(
        children=[
            View(
                class_name="flex",
                children=[View(class_name="w-25", children=[EditableInput(value="a")]), EditableInput(value="b")],
            )
        ]
    ).render(True, renderer)
    assert isinstance(page, DocumentPage)
    row = page.flowables[0]
    assert isinstance(row, Table)
    assert row._argW == [100.0, 300.0]


def test_text_attributes_inherit_from_containers() -> None:
    composer = StyleComposer({"right": {"text_align": "right"}, "big": {"font_size": 20}})
    out = View(class_name="right big", children=[EditableInput(value="x")]).render(True, DocumentRenderer(composer))
    para = out[0]
    assert para.style.alignment == TA_RIGHT
    assert para.style.fontSize == 20


def test_actions_and_missing_logo_render_nothing(tmp_path) -> None:
    renderer = DocumentRenderer()
    assert Action(label="Add").render(True, renderer) == []
    assert Logo(path=str(tmp_path / "missing.png"), width=100).render(True, renderer) == []


def test_page_margins_come_from_page_style() -> None:
    page = invoice_page(initial_invoice(), pdf_mode=True).render(True)
    assert isinstance(page, DocumentPage)
    assert page.margins == (40, 35, 40, 35)
    assert page.flowables


def test_document_mode_attaches_no_handlers() -> None:
    store = object()
    layout = invoice_page(initial_invoice(), pdf_mode=True, store=store)
    assert all(node.on_change is None for node in iter_fields(layout))


def test_renderer_for_resolves_mode() -> None:
    assert isinstance(renderer_for(True), DocumentRenderer)


def test_non_image_logo_renders_nothing(tmp_path, caplog) -> None:
    bogus = tmp_path / "logo.png"
    bogus.write_bytes(b"not an image")
    with caplog.at_level("WARNING"):
        assert Logo(path=str(bogus), width=100).render(True, DocumentRenderer()) == []
    assert "unreadable logo" in caplog.text
