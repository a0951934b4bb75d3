"""Logging setup for the desktop application."""

from __future__ import annotations

import sys

from loguru import logger


LOG_FORMAT = " | ".join(
	(
		"<lk>{time:HH:mm:ss.SSS}</>",
		"<lvl>{level:<8}</>",
		"<c>{module}:{function}:{line}</>",
		"{message}",
	)
)


def configure_logging(level: str = "INFO") -> None:
	# Drop loguru's default handler so messages are not printed twice.
	logger.remove()
	logger.add(sys.stderr, format=LOG_FORMAT, level=level)
	logger.enable("guicalc")
