"""Desktop calculator with a headless engine.

Usage:
    python -m guicalc          # open the calculator window
"""

from loguru import logger

from guicalc.engine import CalculatorEngine, CalculatorState, Outcome, compute
from guicalc.events import Command, Digit, Event, Op, Operator

__all__ = [
	"CalculatorEngine",
	"CalculatorState",
	"Command",
	"Digit",
	"Event",
	"Op",
	"Operator",
	"Outcome",
	"compute",
]

# Silent as a library; configure_logging turns it back on.
logger.disable("guicalc")
