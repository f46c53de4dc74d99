# -*- coding: utf-8 -*-
"""Tests for the tracker facade used by the proxy endpoint."""
from unittest.mock import AsyncMock, patch

from tornado.testing import AsyncTestCase, gen_test

from trackproxy.modules.tracker import tracker
from trackproxy.modules.tracker.status import ShipmentState

CREATE_SHIPMENT = 'trackproxy.modules.tracker.trackship.create_shipment'


class TestGetTrackingInfo(AsyncTestCase):

	@gen_test
	async def test_unknown_fallback(self):
		create = AsyncMock(return_value={'status': 'error', 'status_msg': 'whatever'})
		with patch(CREATE_SHIPMENT, create):
			status = await tracker.get_tracking_info('ABC')

		assert create.call_args.args[0]['tracking_provider'] == 'unknown'
		assert status.carrier == 'UNKNOWN'
		assert status.status is ShipmentState.PENDING

	@gen_test
	async def test_ups_fallback(self):
		create = AsyncMock(return_value={'status': 'success', 'data': {'status': 'shipped'}})
		with patch(CREATE_SHIPMENT, create):
			status = await tracker.get_tracking_info('ABC', postal_code='94105', carrier_fallback='ups')

		body = create.call_args.args[0]
		assert body['tracking_provider'] == 'ups'
		assert body['postal_code'] == '94105'
		assert body['order_id'].startswith('order_')
		assert status.carrier == 'UPS'
		assert status.status is ShipmentState.SHIPPED
