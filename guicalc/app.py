"""Desktop calculator window (Tkinter).

Buttons:
- Memory: MC, MR, M+, M-
- Editing: ← (backspace), C (clear all)
- Unary: %, √, ±
- Binary: ÷ × − + and =

Keyboard input: 0-9 . + - * / % =, Enter, Backspace, Escape.

The window only renders; all arithmetic lives in CalculatorEngine.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import messagebox

from loguru import logger

from guicalc.engine import CalculatorEngine, Outcome
from guicalc.events import Command, Digit, Event, Operator
from guicalc.keys import BUTTON_LAYOUT, event_for_key, event_for_label
from guicalc.log import configure_logging


TITLE = "Calculator"
BUTTON_SIZE = 72
BUTTON_GAP = 6
DISPLAY_FONT = ("Segoe UI", 30)
BUTTON_FONT = ("Segoe UI", 18)

COLORS = {
	"window_bg": "#000000",
	"display_fg": "#FFFFFF",
	"digit_bg": "#333333",
	"digit_fg": "#FFFFFF",
	"func_bg": "#A5A5A5",
	"func_fg": "#000000",
	"op_bg": "#FF9F0A",
	"op_fg": "#FFFFFF",
	"op_active_bg": "#FFFFFF",
	"op_active_fg": "#FF9F0A",
}


def _kind(event: Event) -> str:
	if isinstance(event, Digit) or event is Command.DECIMAL:
		return "digit"
	if isinstance(event, Operator) or event is Command.EQUALS:
		return "op"
	return "func"


class RoundedButton(tk.Canvas):
	"""Canvas drawn as a circle, or as a pill when wider than tall."""

	def __init__(
		self,
		master,
		*,
		text: str,
		command,
		width: int,
		height: int,
		bg: str,
		fg: str,
		font=BUTTON_FONT,
	) -> None:
		super().__init__(
			master,
			width=width,
			height=height,
			bg=COLORS["window_bg"],
			highlightthickness=0,
			bd=0,
		)
		self._text = text
		self._command = command
		self._width = width
		self._height = height
		self._font = font
		self._bg = bg
		self._fg = fg
		self._pressed = False

		super().configure(cursor="hand2")
		self._draw()

		self.bind("<ButtonPress-1>", self._on_press)
		self.bind("<ButtonRelease-1>", self._on_release)
		self.bind("<Leave>", self._on_leave)

	def set_colors(self, bg: str, fg: str) -> None:
		self._bg = bg
		self._fg = fg
		self._draw()

	def _draw(self) -> None:
		self.delete("all")
		x0, y0 = 2, 2
		x1, y1 = self._width - 2, self._height - 2
		# Pressed buttons are drawn with swapped colours.
		fill, ink = (self._fg, self._bg) if self._pressed else (self._bg, self._fg)

		if x1 - x0 <= y1 - y0 + 2:
			self.create_oval(x0, y0, x1, y1, fill=fill, outline=fill)
		else:
			d = y1 - y0
			self.create_oval(x0, y0, x0 + d, y1, fill=fill, outline=fill)
			self.create_oval(x1 - d, y0, x1, y1, fill=fill, outline=fill)
			self.create_rectangle(x0 + d / 2, y0, x1 - d / 2, y1, fill=fill, outline=fill)

		self.create_text(self._width / 2, self._height / 2, text=self._text, fill=ink, font=self._font)

	def _on_press(self, _event: tk.Event) -> None:
		self._pressed = True
		self._draw()

	def _on_release(self, event: tk.Event) -> None:
		was_pressed = self._pressed
		self._pressed = False
		self._draw()
		inside = 0 <= event.x <= self._width and 0 <= event.y <= self._height
		if was_pressed and inside:
			self._command()

	def _on_leave(self, _event: tk.Event) -> None:
		if self._pressed:
			self._pressed = False
			self._draw()


class CalculatorApp:
	def __init__(self, root: tk.Tk, engine: CalculatorEngine | None = None) -> None:
		self.root = root
		self.root.title(TITLE)
		self.root.configure(bg=COLORS["window_bg"])
		self.root.resizable(False, False)

		self.engine = engine if engine is not None else CalculatorEngine()
		self.display_var = tk.StringVar(value=self.engine.display)
		self.op_buttons: dict[Operator, RoundedButton] = {}

		self._build_ui()
		self.root.bind("<Key>", self._on_key)

	def _build_ui(self) -> None:
		columns = max(len(row) for row in BUTTON_LAYOUT)
		tk.Label(
			self.root,
			textvariable=self.display_var,
			bg=COLORS["window_bg"],
			fg=COLORS["display_fg"],
			anchor="e",
			padx=16,
			pady=16,
			font=DISPLAY_FONT,
		).grid(row=0, column=0, columnspan=columns, sticky="nsew")

		for r, row in enumerate(BUTTON_LAYOUT, start=1):
			# A short row stretches its last button across the remaining columns.
			for c, label in enumerate(row):
				span = columns - c if c == len(row) - 1 else 1
				btn = self._make_button(label, span)
				btn.grid(row=r, column=c, columnspan=span, padx=BUTTON_GAP // 2, pady=BUTTON_GAP // 2)

	def _make_button(self, label: str, span: int) -> RoundedButton:
		event = event_for_label(label)
		kind = _kind(event)
		btn = RoundedButton(
			self.root,
			text=label,
			command=lambda: self.handle(event),
			width=BUTTON_SIZE * span + BUTTON_GAP * (span - 1),
			height=BUTTON_SIZE,
			bg=COLORS[f"{kind}_bg"],
			fg=COLORS[f"{kind}_fg"],
		)
		if isinstance(event, Operator):
			self.op_buttons[event] = btn
		return btn

	def _on_key(self, event: tk.Event) -> None:
		calc_event = event_for_key(event.char, event.keysym)
		if calc_event is not None:
			self.handle(calc_event)

	def handle(self, event: Event) -> Outcome:
		outcome = self.engine.dispatch(event)
		self.display_var.set(outcome.display)
		self._update_op_highlight()
		if outcome.warning is not None:
			messagebox.showwarning("Error", outcome.warning, parent=self.root)
		return outcome

	def _update_op_highlight(self) -> None:
		pending = self.engine.state.pending_operator
		for key, btn in self.op_buttons.items():
			if key.op is pending:
				btn.set_colors(COLORS["op_active_bg"], COLORS["op_active_fg"])
			else:
				btn.set_colors(COLORS["op_bg"], COLORS["op_fg"])


def main() -> None:
	configure_logging()
	root = tk.Tk()
	CalculatorApp(root)
	logger.info("calculator window ready")
	root.mainloop()


if __name__ == "__main__":
	main()
