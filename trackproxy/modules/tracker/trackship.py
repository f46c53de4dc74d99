# -*- coding: utf-8 -*-
"""Handles Trackship REST API.

Trackship is a multi-carrier aggregator: a shipment must be created
(registered) first, then its status can be fetched, and updates are pushed
to our webhook.

Every call needs `trackship-api-key` header, so this should never be
called from a browser.
"""
import asyncio
import json
import logging
import time
from typing import Any, Optional

from tornado.httpclient import AsyncHTTPClient, HTTPRequest, HTTPClientError

from trackproxy.environs import env
from trackproxy.modules.tracker.carrier import Carrier, detect_carrier
from trackproxy.modules.tracker.common import TrackshipError

logger = logging.getLogger(__name__)

DESTINATION_COUNTRY = 'US'
DEFAULT_POSTAL_CODE = '00000'


def generate_order_id() -> str:
	return f'order_{int(time.time() * 1000)}'


def build_create_body(
	tracking_number: str,
	carrier: Carrier,
	order_id: Optional[str] = None,
	postal_code: Optional[str] = None,
	store_id: str = env.TRACKSHIP_STORE_ID,
	app_name: str = env.TRACKSHIP_APP_NAME
) -> dict:
	"""Body for shipment creation request."""
	return {
		'tracking_number': tracking_number,
		'tracking_provider': str(carrier),
		'order_id': order_id or generate_order_id(),
		'postal_code': postal_code or DEFAULT_POSTAL_CODE,
		'destination_country': DESTINATION_COUNTRY,
		'app_name': app_name,
		'store_id': store_id,
	}


async def _make_request(
	endpoint: str,
	body: dict,
	api_key: str,
	base_url: str
) -> Any:
	"""POST JSON to Trackship, returns decoded reply.

	`endpoint` - URL of needed endpoint relative to `base_url`.
	HTTP error statuses are not fatal: Trackship describes its errors in the
	body. If the body is not JSON, raw text is returned as is.
	TrackshipError will be raised if Trackship can't be reached at all.
	"""
	http_client = AsyncHTTPClient()
	request = HTTPRequest(
		url=base_url + endpoint,
		method='POST',
		headers={
			'Content-Type': 'application/json',
			'trackship-api-key': api_key,
		},
		body=json.dumps(body, separators=(',', ':'))
	)

	logger.info('Proxying request to Trackship', extra={'json_fields': body})
	try:
		response = await http_client.fetch(request, raise_error=False)
	except (HTTPClientError, OSError) as e:
		logger.error('Trackship request failed: %s', e)
		raise TrackshipError(f'Can\'t get info from Trackship: {e}') from e

	# Undecodable bytes are replaced, such body just won't parse as JSON.
	raw_body = response.body.decode(errors='replace') if response.body else ''
	try:
		response_data = json.loads(raw_body)
	except ValueError:
		logger.warning('Trackship replied with non-JSON body (HTTP %s)', response.code)
		response_data = raw_body

	logger.info(
		'Trackship response (HTTP %s)', response.code,
		extra={'json_fields': {'response': response_data}}
	)
	return response_data


async def create_shipment(
	body: dict,
	api_key: str = env.TRACKSHIP_API_KEY,
	base_url: str = env.TRACKSHIP_URL
) -> Any:
	"""Register shipment on Trackship, returns raw reply.

	`body` - as built by build_create_body().
	"""
	return await _make_request('/shipment/create/', body, api_key, base_url)


async def get_shipment(
	tracking_number: str,
	carrier: Carrier,
	order_id: str,
	api_key: str = env.TRACKSHIP_API_KEY,
	base_url: str = env.TRACKSHIP_URL
) -> Any:
	"""Fetch current status of already registered shipment, returns raw reply."""
	body = {
		'tracking_number': tracking_number,
		'tracking_provider': str(carrier),
		'order_id': order_id,
	}
	return await _make_request('/shipment/get/', body, api_key, base_url)


async def main():
	"""For local manual testing."""
	tracking_number = env.TRACKING_NUMBER_DEFAULT_VALUE
	body = build_create_body(tracking_number, detect_carrier(tracking_number, env.CARRIER_FALLBACK))
	print(await create_shipment(body))


if __name__ == '__main__':
	asyncio.run(main())
