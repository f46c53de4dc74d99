#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Main module of the program, executable."""
import asyncio
import logging

from tornado.options import define, options
import tornado.options

from trackproxy.application import Application
from trackproxy.environs import env
from trackproxy.utils.logging import setup_logging


define("port", default=env.PORT, help="run on the given port", type=int)

logger = logging.getLogger(__name__)


async def main():
	"""Main function of the program."""
	server = Application()
	server.listen(options.port)

	logger.info('Proxy server running on http://localhost:%s', options.port)
	logger.info(
		'Trackship API Key: %s',
		'Configured' if env.TRACKSHIP_API_KEY else 'Not configured'
	)
	await asyncio.Event().wait()


if __name__ == "__main__":
	# Our own logging setup, not tornado's.
	options.logging = None
	tornado.options.parse_command_line()
	setup_logging("trackproxy")
	asyncio.run(main())
