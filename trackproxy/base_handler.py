# -*- coding: utf-8 -*-
"""Common module for all handlers in trackproxy.api, providing a BaseHandler
class that all handlers should inherit from as well as ApplicationError class.

Every response is either a payload or an envelope `{"success": false,
"error": ...}`, and every response carries permissive CORS headers: the
dashboard is served from another origin.
"""
from contextlib import suppress
import json

from tornado import escape
import tornado.web
import voluptuous as vlps


__all__ = ('ApplicationError', 'BaseHandler')


class ApplicationError(tornado.web.HTTPError):
	"""An override of a standard tornado HTTPError class for custom handling."""

	def __init__(self, status_code: int, message: str, *args, **kwargs):
		self.message = message
		super().__init__(status_code, *args, reason=message, **kwargs)


# pylint: disable=abstract-method
class BaseHandler(tornado.web.RequestHandler):
	"""Base API class for all endpoints.

	Inherit from this if you want to create a new handler.
	"""
	def set_default_headers(self):
		self.set_header('Access-Control-Allow-Origin', '*')
		self.set_header('Access-Control-Allow-Methods', 'GET, POST, OPTIONS')
		self.set_header('Access-Control-Allow-Headers', 'Content-Type')

	def options(self, *args, **kwargs):  # pylint: disable=arguments-differ
		"""All OPTIONS (pre-flight) requests are answered with empty OK."""
		self.set_status(200)
		self.finish()

	def write(self, chunk):
		"""Overload of Tornado RequestHandler.write().

		Dicts are written as compact JSON.
		"""
		if isinstance(chunk, dict):
			chunk = json.dumps(
				chunk,
				separators=(',', ':')
			).replace("</", "<\\/")

			self.set_header("Content-Type", "application/json; charset=UTF-8")

		super().write(chunk)

	def write_error(self, status_code, **kwargs):
		"""Send error envelope to client.

		NOTE:
		This should not be called directly.

		Allows to easily report errors via ApplicationError, specifying desired
		code and message. Tornado catches all exceptions and feeds them here:
		HTTPError-derived ones with their own code, everything else as 500.
		"""
		message = None
		with suppress(KeyError, IndexError):
			exception = kwargs["exc_info"][1]
			message = getattr(exception, 'message', None) or str(exception)

		self.set_status(status_code)
		self.finish({'success': False, 'error': message or self._reason})

	def parse_json(self):
		"""Parses self.request.body as JSON.

		Unparsable body is treated as a server error, the same way as any
		other failure while handling the request.
		"""
		try:
			request = escape.json_decode(self.request.body)
		except ValueError as e:
			raise ApplicationError(status_code=500, message="Bad JSON in request body") from e

		return request

	def validate(self, schema: vlps.Schema, data=None):
		"""Validates `data` according to Voluptuous `schema`.

		If `data` is None then request body will be used.
		`schema` may contain transform instructions, so the returned object may
		be different from the original `data`.

		In case of validation error ApplicationError 400 will be raised with
		validator message.
		"""
		if data is None:
			data = self.parse_json()

		try:
			data = schema(data)
		except vlps.Error as e:
			raise ApplicationError(status_code=400, message=str(e)) from e

		# Validated data
		return data
