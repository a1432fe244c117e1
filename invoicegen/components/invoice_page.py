from __future__ import annotations

from typing import Any, Callable, List, Optional

from invoicegen.components.primitives import (
    Action,
    ChangeHandler,
    EditableInput,
    EditableTextarea,
    Logo,
    Page,
    Primitive,
    View,
)
from invoicegen.core.currency import fmt_money
from invoicegen.data.models import Invoice, ProductLine, initial_invoice


class _Binder:
    """Builds change handlers against an edit target, or none at all."""

    def __init__(self, store: Any, enabled: bool) -> None:
        self.store = store if enabled else None

    def field(self, name: str) -> Optional[ChangeHandler]:
        if self.store is None:
            return None
        store = self.store
        return lambda value: store.set_field(name, value)

    def line(self, index: int, name: str) -> Optional[ChangeHandler]:
        if self.store is None:
            return None
        store = self.store
        return lambda value: store.set_line_field(index, name, value)

    def action(self, fn_name: str, *args: Any) -> Optional[Callable[[], None]]:
        if self.store is None:
            return None
        fn = getattr(self.store, fn_name)
        return lambda: fn(*args)


def invoice_page(invoice: Optional[Invoice], pdf_mode: bool = False, store: Any = None) -> Page:
    """Lay out every invoice field in dual-mode primitives.

    *store* receives edits (``set_field``, ``set_line_field``, ``add_line``,
    ``remove_line``). It is ignored in document mode, and without it every
    field is display-only.
    """
    inv = invoice if invoice is not None else initial_invoice()
    bind = _Binder(store, enabled=not pdf_mode)
    cur = inv.currency

    def field(name: str, class_name: str = "", placeholder: str = "") -> EditableInput:
        return EditableInput(
            class_name=class_name,
            placeholder=placeholder,
            value=getattr(inv, name),
            on_change=bind.field(name),
            name=name,
        )

    def textarea(name: str, class_name: str = "", placeholder: str = "") -> EditableTextarea:
        return EditableTextarea(
            class_name=class_name,
            placeholder=placeholder,
            value=getattr(inv, name),
            on_change=bind.field(name),
            name=name,
        )

    def shown(value: str, class_name: str, name: str) -> EditableInput:
        # Derived figure: no handler, so it cannot be edited
        return EditableInput(class_name=class_name, value=value, name=name)

    def labelled(label: str, value: str, placeholder: str = "") -> View:
        return View(
            class_name="flex mb-5",
            children=[
                View(class_name="w-40", children=[field(label, "bold")]),
                View(class_name="w-60", children=[field(value, placeholder=placeholder)]),
            ],
        )

    header = View(
        class_name="flex",
        children=[
            View(
                class_name="w-50",
                children=[
                    Logo(class_name="logo", path=inv.logo, width=inv.logo_width, on_change=bind.field("logo"), name="logo"),
                    field("company_name", "fs-20 bold", "Your Company"),
                    field("name", placeholder="Your Name"),
                    field("company_address", placeholder="Company's Address"),
                    field("company_address2", placeholder="City, State Zip"),
                    field("company_country", placeholder="Country"),
                    field("company_gst", placeholder="GSTIN / Tax ID"),
                ],
            ),
            View(class_name="w-50", children=[field("title", "fs-45 right bold", "Invoice")]),
        ],
    )

    parties = View(
        class_name="flex mt-40",
        children=[
            View(
                class_name="w-55",
                children=[
                    field("bill_to", "bold dark mb-5"),
                    field("client_name", placeholder="Your Client's Name"),
                    field("client_address", placeholder="Client's Address"),
                    field("client_address2", placeholder="City, State Zip"),
                    field("client_country", placeholder="Country"),
                    field("client_gst", placeholder="Client GSTIN / Tax ID"),
                ],
            ),
            View(
                class_name="w-45",
                children=[
                    labelled("invoice_title_label", "invoice_title", "INV-12"),
                    labelled("invoice_date_label", "invoice_date", "Issue date"),
                    labelled("invoice_due_date_label", "invoice_due_date", "Due date"),
                ],
            ),
        ],
    )

    table_head = View(
        class_name="mt-30 bg-dark flex",
        children=[
            View(class_name="w-48 p-4-8", children=[field("product_line_description", "white bold")]),
            View(class_name="w-17 p-4-8", children=[field("product_line_quantity", "white bold right")]),
            View(class_name="w-17 p-4-8", children=[field("product_line_quantity_rate", "white bold right")]),
            View(class_name="w-18 p-4-8", children=[field("product_line_quantity_amount", "white bold right")]),
        ],
    )

    def line_row(i: int, line: ProductLine) -> View:
        return View(
            class_name="row flex",
            children=[
                View(
                    class_name="w-48 p-4-8 pb-10",
                    children=[
                        EditableTextarea(
                            class_name="dark",
                            placeholder="Enter item name/description",
                            value=line.description,
                            on_change=bind.line(i, "description"),
                            name=f"product_lines.{i}.description",
                        )
                    ],
                ),
                View(
                    class_name="w-17 p-4-8 pb-10",
                    children=[
                        EditableInput(
                            class_name="dark right",
                            value=line.quantity,
                            on_change=bind.line(i, "quantity"),
                            name=f"product_lines.{i}.quantity",
                        )
                    ],
                ),
                View(
                    class_name="w-17 p-4-8 pb-10",
                    children=[
                        EditableInput(
                            class_name="dark right",
                            value=line.rate,
                            on_change=bind.line(i, "rate"),
                            name=f"product_lines.{i}.rate",
                        )
                    ],
                ),
                View(
                    class_name="w-18 p-4-8 pb-10",
                    children=[shown(fmt_money(line.amount), "dark right", f"product_lines.{i}.amount")],
                ),
                Action(class_name="row__remove", label="✕", on_click=bind.action("remove_line", i)),
            ],
        )

    rows: List[Primitive] = [line_row(i, ln) for i, ln in enumerate(inv.product_lines)]

    def tax_row(label: str, pct: str, amount_name: str, amount) -> View:
        return View(
            class_name="flex",
            children=[
                View(
                    class_name="w-50 p-5 flex",
                    children=[
                        View(class_name="w-60", children=[field(label)]),
                        View(class_name="w-40", children=[field(pct, "right", "0")]),
                    ],
                ),
                View(class_name="w-50 p-5", children=[shown(fmt_money(amount, cur), "right bold dark", amount_name)]),
            ],
        )

    totals = View(
        class_name="flex",
        children=[
            View(
                class_name="w-50 mt-10",
                children=[Action(class_name="link", label="+ Add Line Item", on_click=bind.action("add_line"))],
            ),
            View(
                class_name="w-50 mt-20",
                children=[
                    View(
                        class_name="flex",
                        children=[
                            View(class_name="w-50 p-5", children=[field("sub_total_label")]),
                            View(
                                class_name="w-50 p-5",
                                children=[shown(fmt_money(inv.sub_total, cur), "right bold dark", "sub_total")],
                            ),
                        ],
                    ),
                    tax_row("tax_label1", "tax_percentage1", "tax1", inv.tax1),
                    tax_row("tax_label2", "tax_percentage2", "tax2", inv.tax2),
                    View(
                        class_name="flex bg-gray p-5",
                        children=[
                            View(class_name="w-50 p-5", children=[field("total_label", "bold dark")]),
                            View(
                                class_name="w-50 p-5 flex",
                                children=[
                                    field("currency", "dark bold right ml-30", "$"),
                                    shown(fmt_money(inv.total), "right bold dark w-auto", "total"),
                                ],
                            ),
                        ],
                    ),
                ],
            ),
        ],
    )

    notes = View(
        class_name="mt-20",
        children=[field("notes_label", "bold w-100"), textarea("notes", "w-100", "Notes")],
    )
    terms = View(
        class_name="mt-20",
        children=[field("term_label", "bold w-100"), textarea("term", "w-100", "Terms and conditions")],
    )

    return Page(
        children=[header, parties, table_head, *rows, totals, notes, terms],
    )


def render_invoice_page(
    invoice: Optional[Invoice],
    pdf_mode: bool = False,
    store: Any = None,
    renderer: Any = None,
) -> Any:
    """Build the layout and render it in one step."""
    return invoice_page(invoice, pdf_mode=pdf_mode, store=store).render(pdf_mode, renderer)
