"""Keyboard and button mapping.

Keys: 0-9 . + - * / % = Enter Backspace Escape Delete
"""

from __future__ import annotations

from guicalc.events import Command, Digit, Event, Op, Operator


# Rows of the button grid, top to bottom.
BUTTON_LAYOUT = [
	["MC", "MR", "M+", "M-"],
	["←", "C", "%", "√"],
	["7", "8", "9", "÷"],
	["4", "5", "6", "×"],
	["1", "2", "3", "−"],
	["±", "0", ".", "+"],
	["="],
]

_OPERATOR_LABELS = {"÷", "×", "−", "+"}

_LABEL_COMMANDS = {
	"MC": Command.MEMORY_CLEAR,
	"MR": Command.MEMORY_RECALL,
	"M+": Command.MEMORY_ADD,
	"M-": Command.MEMORY_SUBTRACT,
	"←": Command.BACKSPACE,
	"C": Command.CLEAR,
	"%": Command.PERCENT,
	"√": Command.SQUARE_ROOT,
	"±": Command.TOGGLE_SIGN,
	".": Command.DECIMAL,
	"=": Command.EQUALS,
}

_KEYSYM_COMMANDS = {
	"Return": Command.EQUALS,
	"KP_Enter": Command.EQUALS,
	"BackSpace": Command.BACKSPACE,
	"Escape": Command.CLEAR,
	"Delete": Command.CLEAR,
}

_CHAR_COMMANDS = {
	".": Command.DECIMAL,
	"=": Command.EQUALS,
	"%": Command.PERCENT,
}


def event_for_label(label: str) -> Event:
	if len(label) == 1 and label in "0123456789":
		return Digit(int(label))
	if label in _OPERATOR_LABELS:
		return Operator(Op.from_symbol(label))
	return _LABEL_COMMANDS[label]


def event_for_key(char: str, keysym: str) -> Event | None:
	if keysym in _KEYSYM_COMMANDS:
		return _KEYSYM_COMMANDS[keysym]
	if len(char) != 1:
		return None
	if char in "0123456789":
		return Digit(int(char))
	if char in "+-*/":
		return Operator(Op(char))
	return _CHAR_COMMANDS.get(char)
