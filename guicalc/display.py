"""Conversion between display text and numbers."""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_EVEN, Context, Decimal


FRACTION_DIGITS = 10
ERROR_TEXT = "Error"

# Wide enough to hold any finite float in fixed-point with the fraction digits.
_CONTEXT = Context(prec=400, rounding=ROUND_HALF_EVEN)
_QUANTUM = Decimal(1).scaleb(-FRACTION_DIGITS)
_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")


class DisplayParseError(ValueError):
	"""The display does not hold a number."""


def parse_display(text: str) -> float:
	# Accepts what digit entry can build, e.g. "0.", "-12.5".
	if not _NUMBER.fullmatch(text):
		raise DisplayParseError(f"not a number: {text!r}")
	return float(text)


def format_number(value: float) -> str:
	"""Render a result for the display.

	At most FRACTION_DIGITS fractional digits (half-even), no exponent,
	trailing zeros and a trailing point trimmed. Infinity and NaN have no
	numeric rendering and show as ERROR_TEXT.
	"""
	if not math.isfinite(value):
		return ERROR_TEXT
	# repr gives the shortest digits that round-trip, e.g. 0.30000000000000004.
	rounded = Decimal(repr(value)).quantize(_QUANTUM, context=_CONTEXT)
	text = format(rounded, "f")
	if "." in text:
		text = text.rstrip("0").rstrip(".")
	return text
