# -*- coding: utf-8 -*-
"""Module with liveness handler: reports that the process is up and whether
Trackship API key is configured (never the key itself).
"""
from trackproxy.base_handler import BaseHandler
from trackproxy.environs import env
from trackproxy.modules.tracker.status import utc_now_iso


class HealthCheckHandler(BaseHandler):
	"""Can be used to health-check requests"""
	def get(self):
		self.write({
			'status': 'ok',
			'timestamp': utc_now_iso(),
			'message': 'Proxy server is running',
			'apiKeyConfigured': bool(env.TRACKSHIP_API_KEY),
		})
