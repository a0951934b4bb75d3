"""Calculator engine: the state machine behind the keypad.

Every handler mutates the engine's CalculatorState and returns an Outcome
holding the new display text. Nothing here touches a window, so the engine
can be driven headless.

Binary operators evaluate eagerly left to right: pressing an operator while
another one is pending computes the pending one first, so `2 + 3 * 4 =`
shows 20.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

from loguru import logger

from guicalc.display import ERROR_TEXT, DisplayParseError, format_number, parse_display
from guicalc.events import Command, Digit, Event, Op, Operator


DIVIDE_BY_ZERO_MESSAGE = "Cannot divide by zero"


@dataclass
class CalculatorState:
	display: str = "0"
	accumulator: float = 0.0
	pending_operator: Op | None = None
	start_new_number: bool = True
	memory: float = 0.0


@dataclass(frozen=True)
class Outcome:
	display: str
	warning: str | None = None


class Computed(NamedTuple):
	value: float
	warning: str | None = None


def compute(a: float, b: float, op: Op) -> Computed:
	"""Apply `op` to the operands.

	Division by zero is not an error: the left operand comes back unchanged
	together with a warning for the user.
	"""
	if op is Op.ADD:
		return Computed(a + b)
	if op is Op.SUBTRACT:
		return Computed(a - b)
	if op is Op.MULTIPLY:
		return Computed(a * b)
	if op is Op.DIVIDE:
		if b == 0:
			return Computed(a, DIVIDE_BY_ZERO_MESSAGE)
		return Computed(a / b)
	raise ValueError(f"unknown operator: {op!r}")


class CalculatorEngine:
	def __init__(self, state: CalculatorState | None = None) -> None:
		self.state = state if state is not None else CalculatorState()
		self._commands = {
			Command.DECIMAL: self.on_decimal,
			Command.EQUALS: self.on_equals,
			Command.CLEAR: self.on_clear,
			Command.BACKSPACE: self.on_backspace,
			Command.TOGGLE_SIGN: self.on_toggle_sign,
			Command.SQUARE_ROOT: self.on_square_root,
			Command.PERCENT: self.on_percent,
			Command.MEMORY_ADD: self.on_memory_add,
			Command.MEMORY_SUBTRACT: self.on_memory_subtract,
			Command.MEMORY_RECALL: self.on_memory_recall,
			Command.MEMORY_CLEAR: self.on_memory_clear,
		}

	@property
	def display(self) -> str:
		return self.state.display

	def dispatch(self, event: Event) -> Outcome:
		logger.debug("event {!r} on display {!r}", event, self.state.display)
		if isinstance(event, Digit):
			return self.on_digit(event.value)
		if isinstance(event, Operator):
			return self.on_operator(event.op)
		if isinstance(event, Command):
			return self._commands[event]()
		raise TypeError(f"not a calculator event: {event!r}")

	def _outcome(self, warning: str | None = None) -> Outcome:
		if warning is not None:
			logger.warning(warning)
		return Outcome(self.state.display, warning)

	def _parsed(self) -> float | None:
		try:
			return parse_display(self.state.display)
		except DisplayParseError as exc:
			logger.debug("{}", exc)
			return None

	# Entry

	def on_digit(self, digit: int) -> Outcome:
		s = self.state
		char = Digit(digit).char
		if s.start_new_number:
			s.display = char
			s.start_new_number = False
		elif s.display == "0":
			s.display = char
		else:
			s.display += char
		return self._outcome()

	def on_decimal(self) -> Outcome:
		s = self.state
		if s.start_new_number:
			s.display = "0."
			s.start_new_number = False
		elif "." not in s.display:
			s.display += "."
		return self._outcome()

	def on_clear(self) -> Outcome:
		s = self.state
		s.display = "0"
		s.accumulator = 0.0
		s.pending_operator = None
		s.start_new_number = True
		return self._outcome()

	def on_backspace(self) -> Outcome:
		s = self.state
		if s.start_new_number:
			return self._outcome()
		if len(s.display) <= 1:
			s.display = "0"
			s.start_new_number = True
		else:
			s.display = s.display[:-1]
		return self._outcome()

	# Unary

	def on_toggle_sign(self) -> Outcome:
		s = self.state
		value = self._parsed()
		s.display = "0" if value is None else format_number(-value)
		return self._outcome()

	def on_square_root(self) -> Outcome:
		s = self.state
		value = self._parsed()
		if value is None:
			s.display = "0"
		elif value < 0:
			logger.debug("square root of negative {}", value)
			s.display = ERROR_TEXT
		else:
			s.display = format_number(math.sqrt(value))
		s.start_new_number = True
		return self._outcome()

	def on_percent(self) -> Outcome:
		s = self.state
		value = self._parsed()
		s.display = "0" if value is None else format_number(value / 100.0)
		s.start_new_number = True
		return self._outcome()

	# Memory

	def on_memory_add(self) -> Outcome:
		s = self.state
		value = self._parsed()
		if value is not None:
			s.memory += value
		s.start_new_number = True
		return self._outcome()

	def on_memory_subtract(self) -> Outcome:
		s = self.state
		value = self._parsed()
		if value is not None:
			s.memory -= value
		s.start_new_number = True
		return self._outcome()

	def on_memory_recall(self) -> Outcome:
		s = self.state
		s.display = format_number(s.memory)
		s.start_new_number = True
		return self._outcome()

	def on_memory_clear(self) -> Outcome:
		self.state.memory = 0.0
		return self._outcome()

	# Binary

	def on_operator(self, op: Op) -> Outcome:
		s = self.state
		warning = None
		displayed = self._parsed()
		if displayed is not None:
			if s.pending_operator is not None:
				s.accumulator, warning = compute(s.accumulator, displayed, s.pending_operator)
				s.display = format_number(s.accumulator)
			else:
				s.accumulator = displayed
		s.pending_operator = Op(op)
		s.start_new_number = True
		return self._outcome(warning)

	def on_equals(self) -> Outcome:
		s = self.state
		if s.pending_operator is None:
			return self._outcome()
		displayed = self._parsed()
		if displayed is None:
			s.display = ERROR_TEXT
			s.start_new_number = True
			return self._outcome()
		result, warning = compute(s.accumulator, displayed, s.pending_operator)
		s.display = format_number(result)
		s.accumulator = result
		s.pending_operator = None
		s.start_new_number = True
		return self._outcome(warning)
