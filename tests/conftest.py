"""Shared fixtures: a fresh engine, a keypad driver and a log collector."""

import pytest
from loguru import logger

from guicalc.engine import CalculatorEngine
from guicalc.keys import event_for_label


@pytest.fixture
def engine():
	return CalculatorEngine()


@pytest.fixture
def press(engine):
	"""Press button labels in order; returns every Outcome produced."""

	def _press(*labels):
		return [engine.dispatch(event_for_label(label)) for label in labels]

	return _press


@pytest.fixture
def log_records():
	records = []
	logger.enable("guicalc")
	handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
	yield records
	logger.remove(handler_id)
	logger.disable("guicalc")
