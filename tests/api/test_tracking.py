# -*- coding: utf-8 -*-
"""Tests for the tracking proxy endpoint."""
import json
from unittest.mock import AsyncMock, patch

from tornado.testing import AsyncHTTPTestCase

from trackproxy.application import Application
from trackproxy.modules.tracker.common import TrackshipError

CREATE_SHIPMENT = 'trackproxy.modules.tracker.trackship.create_shipment'


class TestTrackingHandler(AsyncHTTPTestCase):

	def get_app(self):
		return Application()

	def _post(self, body, path='/api/tracking'):
		if not isinstance(body, (str, bytes)):
			body = json.dumps(body)
		response = self.fetch(path, method='POST', body=body)
		return response, json.loads(response.body)

	def test_success(self):
		create = AsyncMock(return_value={
			'status': 'success',
			'data': {'status': 'shipped', 'current_location': 'Distribution Center'},
		})
		with patch(CREATE_SHIPMENT, create):
			response, data = self._post({'trackingNumber': '1Z999AA1234567890', 'orderId': 'o-1'})

		assert response.code == 200
		assert response.headers['Access-Control-Allow-Origin'] == '*'
		assert data['success'] is True
		assert data['data']['trackingNumber'] == '1Z999AA1234567890'
		assert data['data']['status'] == 'shipped'
		assert data['data']['carrier'] == 'UPS'
		assert data['data']['currentLocation'] == 'Distribution Center'
		assert data['data']['trackshipResponse']['status'] == 'success'

		body = create.call_args.args[0]
		assert body['tracking_provider'] == 'ups'
		assert body['order_id'] == 'o-1'
		assert body['postal_code'] == '00000'
		assert body['destination_country'] == 'US'

	def test_missing_store_is_not_a_failure(self):
		create = AsyncMock(return_value={'status': 'error', 'status_msg': 'missing_store'})
		with patch(CREATE_SHIPMENT, create):
			response, data = self._post({'trackingNumber': 'DHL888999000'})

		assert response.code == 200
		assert data['success'] is True
		assert data['data']['error'] == 'missing_store'
		assert data['data']['status'] == 'pending'
		assert data['data']['carrier'] == 'DHL'

	def test_unrecognized_reply_is_unavailable(self):
		with patch(CREATE_SHIPMENT, AsyncMock(return_value={'status': 'ok'})):
			response, data = self._post({'trackingNumber': 'ABC'})

		assert response.code == 200
		assert data['data']['statusDescription'] == 'Tracking data unavailable'
		assert data['data']['carrier'] == 'UNKNOWN'
		assert 'estimatedDelivery' not in data['data']

	def test_upstream_failure(self):
		create = AsyncMock(side_effect=TrackshipError('Can\'t get info from Trackship'))
		with patch(CREATE_SHIPMENT, create):
			response, data = self._post({'trackingNumber': '1Z999AA1234567890'})

		assert response.code == 500
		assert data == {'success': False, 'error': 'Can\'t get info from Trackship'}

	def test_unexpected_failure(self):
		with patch(CREATE_SHIPMENT, AsyncMock(side_effect=RuntimeError('kaboom'))):
			response, data = self._post({'trackingNumber': '1Z999AA1234567890'})

		assert response.code == 500
		assert data == {'success': False, 'error': 'kaboom'}

	def test_malformed_json(self):
		create = AsyncMock()
		with patch(CREATE_SHIPMENT, create):
			response, data = self._post('{"trackingNumber": ')

		assert response.code == 500
		assert data['success'] is False
		assert data['error']
		create.assert_not_called()

	def test_missing_tracking_number(self):
		response, data = self._post({'orderId': 'o-1'})

		assert response.code == 400
		assert data['success'] is False
		assert 'trackingNumber' in data['error']

	def test_serverless_path(self):
		with patch(CREATE_SHIPMENT, AsyncMock(return_value={'status': 'success', 'data': {}})):
			response, data = self._post({'trackingNumber': 'X'}, path='/.netlify/functions/tracking')

		assert response.code == 200
		assert data['data']['statusDescription'] == 'Tracking available'

	def test_preflight(self):
		response = self.fetch('/api/tracking', method='OPTIONS')

		assert response.code == 200
		assert response.body == b''
		assert response.headers['Access-Control-Allow-Origin'] == '*'
		assert 'POST' in response.headers['Access-Control-Allow-Methods']
		assert 'OPTIONS' in response.headers['Access-Control-Allow-Methods']
		assert 'Content-Type' in response.headers['Access-Control-Allow-Headers']

	def test_non_object_body(self):
		response, data = self._post(['1Z999AA1234567890'])

		assert response.code == 400
		assert data['success'] is False

	def test_response_is_compact_json(self):
		create = AsyncMock(return_value={'status': 'success', 'data': {'current_location': '</script>'}})
		with patch(CREATE_SHIPMENT, create):
			response = self.fetch('/api/tracking', method='POST', body='{"trackingNumber":"X"}')

		assert response.headers['Content-Type'] == 'application/json; charset=UTF-8'
		assert b'<\\/script>' in response.body
		assert json.loads(response.body)['data']['currentLocation'] == '</script>'
