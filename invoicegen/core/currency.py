from __future__ import annotations

from decimal import Decimal, ROUND_HALF_EVEN, InvalidOperation
from typing import Iterable


def to_decimal(x: object) -> Decimal:
	"""Best-effort conversion to Decimal via str to avoid binary float artifacts.

	Blank, unparseable and non-finite input (``"abc"``, ``"nan"``) counts as zero.
	"""
	if x is None:
		return Decimal("0")
	try:
		d = Decimal(str(x).strip().replace(",", ""))
	except (InvalidOperation, ValueError, TypeError):
		return Decimal("0")
	return d if d.is_finite() else Decimal("0")


def round_money_dec(x: object) -> Decimal:
	"""Round to 2 decimals (banker's rounding) and return Decimal."""
	d = to_decimal(x)
	return d.quantize(Decimal("0.01"), rounding=ROUND_HALF_EVEN)


def fmt_money(x: object, currency: str = "") -> str:
	"""Format a monetary value with two decimals, optionally prefixed by a currency symbol.

	Negative amounts keep the sign in front of the symbol: ``-$5.00``.
	"""
	q = round_money_dec(x)
	sign = "-" if q < 0 else ""
	return f"{sign}{currency or ''}{abs(q):.2f}"


def percent_of(amount: object, percentage: object) -> Decimal:
	"""Return ``amount * percentage / 100``; unparseable percentages count as zero."""
	return to_decimal(amount) * to_decimal(percentage) / Decimal("100")


def sum_money(values: Iterable[object]) -> Decimal:
	"""Accumulate monetary values exactly using Decimal."""
	total = Decimal("0")
	for v in values:
		total += to_decimal(v)
	return total
