# -*- coding: utf-8 -*-
"""
Logging configuration.

Plain stdout logging; structured context is passed through
`extra={"json_fields": {...}}` and rendered after the message.
"""

import json
import logging
import sys

from trackproxy.environs import env

# Flag to track if logging is already configured
_logging_configured = False


class LocalFormatter(logging.Formatter):
	"""Custom formatter that displays json_fields from extra dict."""

	def format(self, record: logging.LogRecord) -> str:
		message = super().format(record)

		json_fields = getattr(record, "json_fields", None)
		if json_fields:
			fields_str = json.dumps(json_fields, indent=2, default=str)
			message = f"{message}\n{fields_str}"

		return message


def setup_logging(service_name: str = "trackproxy", level: str = None):
	"""
	Configure the root logger once per process.

	Args:
		service_name: Name of the service for log identification
		level: Log level name, defaults to env.LOG_LEVEL
	"""
	global _logging_configured

	if _logging_configured:
		return

	handler = logging.StreamHandler(sys.stdout)
	handler.setFormatter(
		LocalFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
	)

	root_logger = logging.getLogger()
	root_logger.setLevel(level or env.LOG_LEVEL)
	root_logger.addHandler(handler)

	# Tornado logs every request at INFO, keep those.
	logging.getLogger("tornado.access").setLevel(logging.INFO)

	_logging_configured = True
	logging.getLogger(__name__).info("Logging configured for service: %s", service_name)
