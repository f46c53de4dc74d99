# -*- coding: utf-8 -*-
"""Module with handler that proxies tracking requests to Trackship.

Keeps Trackship API key on the server and gets around browser CORS limits.
"""
import logging

from trackproxy.base_handler import BaseHandler, ApplicationError
from trackproxy.modules.tracker.common import CarrierTrackingError
import trackproxy.modules.tracker.tracker as tracker

from trackproxy.validation.tracker import TRACKING_REQUEST_SCHEMA

logger = logging.getLogger(__name__)


class TrackingHandler(BaseHandler):
	async def post(self):
		"""Register shipment on Trackship and return its normalized status.

		Trackship-reported problems (like missing store) are not failures:
		they come back as a degraded status with `error` tag.
		"""
		request = self.validate(TRACKING_REQUEST_SCHEMA)

		try:
			result = await tracker.get_tracking_info(
				request['trackingNumber'],
				order_id=request.get('orderId'),
				postal_code=request.get('postalCode')
			)
		except CarrierTrackingError as e:
			logger.error('Proxy error for %s: %s', request['trackingNumber'], e)
			raise ApplicationError(status_code=500, message=str(e))

		self.write({'success': True, 'data': result.to_dict()})
