from __future__ import annotations

from dataclasses import dataclass, fields, replace
from decimal import Decimal
from typing import Any, Dict, Tuple, Union

from invoicegen.core.currency import percent_of, sum_money, to_decimal

Number = Union[str, int, float, Decimal]


class InvoiceFieldError(KeyError):
	"""Raised when an update names a field the invoice does not have."""


@dataclass(frozen=True)
class ProductLine:
	description: str = ""
	# Kept as entered; see ``qty``/``unit_rate`` for the numeric view
	quantity: Number = ""
	rate: Number = ""

	@property
	def qty(self) -> Decimal:
		return to_decimal(self.quantity)

	@property
	def unit_rate(self) -> Decimal:
		return to_decimal(self.rate)

	@property
	def amount(self) -> Decimal:
		# Derived on every read, never stored
		return self.qty * self.unit_rate


# snake_case attribute -> camelCase key used by exported/imported dicts
_KEYS: Dict[str, str] = {
	"logo": "logo",
	"logo_width": "logoWidth",
	"title": "title",
	"company_name": "companyName",
	"name": "name",
	"company_address": "companyAddress",
	"company_address2": "companyAddress2",
	"company_country": "companyCountry",
	"company_gst": "companyGST",
	"bill_to": "billTo",
	"client_name": "clientName",
	"client_address": "clientAddress",
	"client_address2": "clientAddress2",
	"client_country": "clientCountry",
	"client_gst": "clientGST",
	"invoice_title_label": "invoiceTitleLabel",
	"invoice_title": "invoiceTitle",
	"invoice_date_label": "invoiceDateLabel",
	"invoice_date": "invoiceDate",
	"invoice_due_date_label": "invoiceDueDateLabel",
	"invoice_due_date": "invoiceDueDate",
	"product_line_description": "productLineDescription",
	"product_line_quantity": "productLineQuantity",
	"product_line_quantity_rate": "productLineQuantityRate",
	"product_line_quantity_amount": "productLineQuantityAmount",
	"product_lines": "productLines",
	"sub_total_label": "subTotalLabel",
	"tax_label1": "taxLabel1",
	"tax_label2": "taxLabel2",
	"tax_percentage1": "taxPercentage1",
	"tax_percentage2": "taxPercentage2",
	"total_label": "totalLabel",
	"currency": "currency",
	"notes_label": "notesLabel",
	"notes": "notes",
	"term_label": "termLabel",
	"term": "term",
}


@dataclass(frozen=True)
class Invoice:
	"""The whole document. Instances are never mutated; edits build a new Invoice."""

	logo: str = ""
	logo_width: int = 0
	title: str = ""
	company_name: str = ""
	name: str = ""
	company_address: str = ""
	company_address2: str = ""
	company_country: str = ""
	company_gst: str = ""

	bill_to: str = ""
	client_name: str = ""
	client_address: str = ""
	client_address2: str = ""
	client_country: str = ""
	client_gst: str = ""

	invoice_title_label: str = ""
	invoice_title: str = ""
	invoice_date_label: str = ""
	invoice_date: str = ""
	invoice_due_date_label: str = ""
	invoice_due_date: str = ""

	product_line_description: str = ""
	product_line_quantity: str = ""
	product_line_quantity_rate: str = ""
	product_line_quantity_amount: str = ""

	product_lines: Tuple[ProductLine, ...] = ()

	sub_total_label: str = ""
	tax_label1: str = ""
	tax_label2: str = ""
	tax_percentage1: str = ""
	tax_percentage2: str = ""

	total_label: str = ""
	currency: str = ""

	notes_label: str = ""
	notes: str = ""
	term_label: str = ""
	term: str = ""

	# Derived figures
	@property
	def sub_total(self) -> Decimal:
		return sum_money(line.amount for line in self.product_lines)

	@property
	def tax1(self) -> Decimal:
		return percent_of(self.sub_total, self.tax_percentage1)

	@property
	def tax2(self) -> Decimal:
		return percent_of(self.sub_total, self.tax_percentage2)

	@property
	def total(self) -> Decimal:
		return self.sub_total + self.tax1 + self.tax2

	# Immutable updates
	def with_field(self, name: str, value: Any) -> "Invoice":
		if name not in _KEYS or name == "product_lines":
			raise InvoiceFieldError(name)
		if name == "logo_width":
			value = int(to_decimal(value))
		return replace(self, **{name: value})

	def with_line_field(self, index: int, name: str, value: Any) -> "Invoice":
		if name not in ("description", "quantity", "rate"):
			raise InvoiceFieldError(name)
		lines = list(self.product_lines)
		lines[index] = replace(lines[index], **{name: value})
		return replace(self, product_lines=tuple(lines))

	def with_line_added(self, line: ProductLine | None = None) -> "Invoice":
		line = line or ProductLine(quantity="1", rate="0.00")
		return replace(self, product_lines=self.product_lines + (line,))

	def with_line_removed(self, index: int) -> "Invoice":
		lines = list(self.product_lines)
		del lines[index]
		return replace(self, product_lines=tuple(lines))

	# Plain-dict conversion (camelCase keys)
	def to_dict(self) -> Dict[str, Any]:
		out: Dict[str, Any] = {}
		for f in fields(self):
			value = getattr(self, f.name)
			if f.name == "product_lines":
				value = [
					{"description": ln.description, "quantity": ln.quantity, "rate": ln.rate}
					for ln in value
				]
			out[_KEYS[f.name]] = value
		return out

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "Invoice":
		# Missing keys keep defaults, unknown keys are ignored
		by_key = {v: k for k, v in _KEYS.items()}
		kwargs: Dict[str, Any] = {}
		for key, value in (data or {}).items():
			attr = by_key.get(key)
			if attr is None or value is None:
				continue
			if attr == "product_lines":
				value = tuple(
					ProductLine(
						description=str(ln.get("description", "") or ""),
						quantity=ln.get("quantity", ""),
						rate=ln.get("rate", ""),
					)
					for ln in value
					if isinstance(ln, dict)
				)
			elif attr == "logo_width":
				value = int(to_decimal(value))
			kwargs[attr] = value
		return cls(**kwargs)


def initial_invoice() -> Invoice:
	"""Invoice pre-filled with the default labels shown in a fresh editor."""
	return Invoice(
		logo_width=100,
		title="INVOICE",
		bill_to="Bill To:",
		invoice_title_label="Invoice#",
		invoice_title="INV-12",
		invoice_date_label="Invoice Date",
		invoice_due_date_label="Due Date",
		product_line_description="Item Description",
		product_line_quantity="Qty",
		product_line_quantity_rate="Rate",
		product_line_quantity_amount="Amount",
		product_lines=(
			ProductLine(description="Brochure Design", quantity="2", rate="100.00"),
			ProductLine(description="", quantity="1", rate="0.00"),
		),
		sub_total_label="Sub Total",
		tax_label1="Sale Tax (%)",
		tax_label2="Other Tax (%)",
		tax_percentage1="10",
		tax_percentage2="",
		total_label="TOTAL",
		currency="$",
		notes_label="Notes",
		notes="It was great doing business with you.",
		term_label="Terms & Conditions",
		term="Please make the payment by the due date.",
	)
