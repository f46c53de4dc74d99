# -*- coding: utf-8 -*-
"""Tests for liveness and version endpoints."""
import json
from unittest.mock import patch

from tornado.testing import AsyncHTTPTestCase

from trackproxy.application import Application


class TestHealthCheck(AsyncHTTPTestCase):

	def get_app(self):
		return Application()

	def test_health(self):
		response = self.fetch('/api/health')
		data = json.loads(response.body)

		assert response.code == 200
		assert data['status'] == 'ok'
		assert data['message'] == 'Proxy server is running'
		assert data['apiKeyConfigured'] is False
		assert data['timestamp'].endswith('Z')

	def test_reports_configured_key_without_leaking_it(self):
		with patch('trackproxy.environs.env.TRACKSHIP_API_KEY', 'super-secret'):
			response = self.fetch('/api/healthcheck')

		assert json.loads(response.body)['apiKeyConfigured'] is True
		assert b'super-secret' not in response.body

	def test_version(self):
		response = self.fetch('/api/version')
		assert json.loads(response.body) == {'version': '1.0.0'}
