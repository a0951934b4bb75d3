"""Input events understood by the calculator engine.

A click or key press becomes exactly one of:
- Digit(0-9)
- Operator(Op.ADD | Op.SUBTRACT | Op.MULTIPLY | Op.DIVIDE)
- a Command member (decimal point, equals, clear, memory keys, ...)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Op(str, Enum):
	ADD = "+"
	SUBTRACT = "-"
	MULTIPLY = "*"
	DIVIDE = "/"

	@classmethod
	def from_symbol(cls, symbol: str) -> Op:
		# Button glyphs map onto the ASCII operators.
		return cls(_GLYPHS.get(symbol, symbol))


_GLYPHS = {"×": "*", "÷": "/", "−": "-"}


class Command(Enum):
	DECIMAL = "decimal"
	EQUALS = "equals"
	CLEAR = "clear"
	BACKSPACE = "backspace"
	TOGGLE_SIGN = "toggle_sign"
	SQUARE_ROOT = "square_root"
	PERCENT = "percent"
	MEMORY_ADD = "memory_add"
	MEMORY_SUBTRACT = "memory_subtract"
	MEMORY_RECALL = "memory_recall"
	MEMORY_CLEAR = "memory_clear"


@dataclass(frozen=True)
class Digit:
	value: int

	def __post_init__(self) -> None:
		if isinstance(self.value, bool) or not isinstance(self.value, int) or not 0 <= self.value <= 9:
			raise ValueError(f"digit must be an int in 0-9, got {self.value!r}")

	@property
	def char(self) -> str:
		return str(self.value)


@dataclass(frozen=True)
class Operator:
	op: Op


Event = Union[Digit, Operator, Command]
