# -*- coding: utf-8 -*-
"""Module with handler receiving Trackship webhook pushes.

Pushes are only logged for now. Trackship retries on non-2xx, so anything
parsable is acknowledged.
"""
import logging

import voluptuous as vlps

from trackproxy.base_handler import BaseHandler
from trackproxy.validation.webhook import WEBHOOK_SCHEMA

logger = logging.getLogger(__name__)


def summarize(payload) -> dict:
	"""Pick fields worth logging from a push."""
	if not isinstance(payload, dict):
		payload = {}

	try:
		payload = WEBHOOK_SCHEMA(payload)
	except vlps.Invalid as e:
		logger.warning('Unexpected webhook payload shape: %s', e)

	events = payload.get('events')
	return {
		'orderId': payload.get('order_id'),
		'trackingNumber': payload.get('tracking_number'),
		'provider': payload.get('tracking_provider'),
		'status': payload.get('tracking_event_status'),
		'eventCount': len(events) if isinstance(events, list) else 0,
	}


class WebhookHandler(BaseHandler):
	def post(self):
		"""Acknowledge Trackship push."""
		payload = self.parse_json()
		logger.info('Received webhook from Trackship', extra={'json_fields': payload})
		logger.info('Processed webhook data', extra={'json_fields': summarize(payload)})

		self.write({'success': True, 'message': 'Webhook received successfully'})
