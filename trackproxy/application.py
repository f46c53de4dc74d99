# -*- coding: utf-8 -*-
"""Tornado application: routes and version."""
import os.path

import tornado.web

from trackproxy import api

_ROOT = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))

# pylint: disable=bad-whitespace
handlers = [
	(r"/api/health",                                api.healthcheck.HealthCheckHandler),
	(r"/api/healthcheck",                           api.healthcheck.HealthCheckHandler),
	(r"/api/version",                               api.version.VersionHandler),

	# API
	(r"/api/tracking",                              api.tracker.TrackingHandler),
	(r"/api/webhook",                               api.webhook.WebhookHandler),
	(r"/api/webhook/trackship",                     api.webhook.WebhookHandler),

	# Paths used by serverless deployment of the dashboard.
	(r"/\.netlify/functions/tracking",              api.tracker.TrackingHandler),
	(r"/\.netlify/functions/webhook",               api.webhook.WebhookHandler),
]
# pylint: enable=bad-whitespace


class Application(tornado.web.Application):
	"""Main application class."""
	def __init__(self, **settings):
		# Read app version.
		with open(os.path.join(_ROOT, 'VERSION')) as file:
			self.version = file.read().strip()

		super().__init__(handlers, **settings)
