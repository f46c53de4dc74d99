# -*- coding: utf-8 -*-
"""Tracking clients used by the dashboard side, and the selector between them.

Three interchangeable implementations:
 - MockTrackingClient: canned statuses, no network;
 - ProxyTrackingClient: goes through our own proxy endpoint;
 - DirectTrackingClient: talks to Trackship itself. From a browser this hits
   CORS restrictions, which is the reason the proxy exists at all.

Use select_tracking_client() to get one, never construct them globally.
"""
import asyncio
import dataclasses
import json
import logging
from typing import Optional, Protocol

from tornado.httpclient import AsyncHTTPClient, HTTPRequest, HTTPClientError

from trackproxy.environs import env
from trackproxy.modules.tracker import trackship
from trackproxy.modules.tracker.carrier import detect_carrier
from trackproxy.modules.tracker.common import TrackingClientError, TrackshipError
from trackproxy.modules.tracker.status import (
	ResponseKind,
	ShipmentState,
	TrackingStatus,
	classify_response,
	normalize,
	unavailable_placeholder,
	utc_now_iso,
)

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class ClientConfig:
	use_proxy: bool = False
	use_real_api: bool = False
	api_key: str = ''
	proxy_url: str = 'http://localhost:3001/api'
	trackship_url: str = 'https://api.trackship.com/v1'
	store_id: str = 'test_store_123'
	app_name: str = 'Workspace Shipping Dashboard'
	carrier_fallback: str = 'unknown'
	mock_delay: float = 1.0

	@classmethod
	def from_env(cls) -> 'ClientConfig':
		return cls(
			use_proxy=env.USE_PROXY_API,
			use_real_api=env.USE_REAL_TRACKSHIP_API,
			api_key=env.TRACKSHIP_API_KEY,
			proxy_url=env.PROXY_API_URL,
			trackship_url=env.TRACKSHIP_URL,
			store_id=env.TRACKSHIP_STORE_ID,
			app_name=env.TRACKSHIP_APP_NAME,
			carrier_fallback=env.CARRIER_FALLBACK,
			mock_delay=env.MOCK_DELAY,
		)


class TrackingClient(Protocol):
	async def get_tracking_status(
		self,
		tracking_number: str,
		order_id: Optional[str] = None,
		postal_code: Optional[str] = None
	) -> TrackingStatus:
		pass

	async def get_batch_tracking_status(self, tracking_numbers: list[str]) -> list[TrackingStatus]:
		pass


class _BatchMixin:
	async def get_batch_tracking_status(self, tracking_numbers: list[str]) -> list[TrackingStatus]:
		"""Look up all numbers concurrently.

		A failed lookup is replaced with a placeholder, the batch itself never
		fails. Results are in the same order as `tracking_numbers`.
		"""
		results = await asyncio.gather(
			*(
				self.get_tracking_status(tracking_number, f'batch_{index}')
				for index, tracking_number in enumerate(tracking_numbers)
			),
			return_exceptions=True
		)

		statuses = []
		for tracking_number, result in zip(tracking_numbers, results):
			if isinstance(result, Exception):
				logger.error('Failed to track %s: %s', tracking_number, result)
				result = unavailable_placeholder(tracking_number)
			statuses.append(result)

		return statuses


# Sample numbers for the dashboard demo.
MOCK_DATA = {
	'UPS123456789': (ShipmentState.PENDING, 'UPS'),
	'FEDEX987654321': (ShipmentState.SHIPPED, 'FedEx'),
	'USPS555666777': (ShipmentState.DELIVERED, 'USPS'),
	'DHL888999000': (ShipmentState.SHIPPED, 'DHL'),
	'1Z999AA1234567890': (ShipmentState.SHIPPED, 'UPS'),
	'9400100000000000000000': (ShipmentState.DELIVERED, 'USPS'),
}

MOCK_DESCRIPTIONS = {
	ShipmentState.PENDING: 'Package information sent to carrier',
	ShipmentState.SHIPPED: 'Package in transit',
	ShipmentState.DELIVERED: 'Package delivered successfully',
}


class MockTrackingClient(_BatchMixin):
	def __init__(self, delay: float = 1.0):
		self.delay = delay

	async def get_tracking_status(
		self,
		tracking_number: str,
		order_id: Optional[str] = None,
		postal_code: Optional[str] = None
	) -> TrackingStatus:
		# Pretend to be a network call.
		await asyncio.sleep(self.delay)

		state, carrier = MOCK_DATA.get(tracking_number, (ShipmentState.PENDING, 'Unknown'))
		return TrackingStatus(
			tracking_number=tracking_number,
			status=state,
			last_activity=utc_now_iso(),
			estimated_delivery='2024-01-20' if state is ShipmentState.PENDING else None,
			current_location='Distribution Center' if state is ShipmentState.SHIPPED else None,
			status_description=MOCK_DESCRIPTIONS[state],
			carrier=carrier,
		)


class ProxyTrackingClient(_BatchMixin):
	def __init__(self, base_url: str):
		self.base_url = base_url.rstrip('/')

	async def get_tracking_status(
		self,
		tracking_number: str,
		order_id: Optional[str] = None,
		postal_code: Optional[str] = None
	) -> TrackingStatus:
		"""Ask our proxy endpoint.

		TrackingClientError will be raised on non-2xx or unsuccessful reply.
		"""
		body = {'trackingNumber': tracking_number}
		if order_id:
			body['orderId'] = order_id
		if postal_code:
			body['postalCode'] = postal_code

		request = HTTPRequest(
			url=self.base_url + '/tracking',
			method='POST',
			headers={'Content-Type': 'application/json'},
			body=json.dumps(body, separators=(',', ':'))
		)
		try:
			response = await AsyncHTTPClient().fetch(request)
		except (HTTPClientError, OSError) as e:
			raise TrackingClientError(f'Proxy API error: {e}') from e

		try:
			data = json.loads(response.body.decode())
		except ValueError as e:
			raise TrackingClientError('Invalid response from proxy') from e

		if not isinstance(data, dict) or not data.get('success'):
			error = data.get('error') if isinstance(data, dict) else None
			raise TrackingClientError(error or 'Failed to get tracking data')

		if not isinstance(data.get('data'), dict):
			raise TrackingClientError('Invalid response from proxy')

		return TrackingStatus.from_dict(data['data'])


class DirectTrackingClient(_BatchMixin):
	def __init__(
		self,
		api_key: str,
		base_url: str,
		store_id: str,
		app_name: str,
		carrier_fallback: str = 'unknown'
	):
		if not api_key:
			raise ValueError('Trackship API key not configured')
		self.api_key = api_key
		self.base_url = base_url.rstrip('/')
		self.store_id = store_id
		self.app_name = app_name
		self.carrier_fallback = carrier_fallback

	async def get_tracking_status(
		self,
		tracking_number: str,
		order_id: Optional[str] = None,
		postal_code: Optional[str] = None
	) -> TrackingStatus:
		"""Register shipment, then fetch its actual status.

		TrackshipError will be raised if creation is rejected for any reason
		other than missing store setup.
		"""
		carrier = detect_carrier(tracking_number, self.carrier_fallback)
		body = trackship.build_create_body(
			tracking_number,
			carrier,
			order_id=order_id,
			postal_code=postal_code,
			store_id=self.store_id,
			app_name=self.app_name
		)
		created = await trackship.create_shipment(body, api_key=self.api_key, base_url=self.base_url)

		kind, _ = classify_response(created)
		if kind is ResponseKind.MISSING_STORE:
			return normalize(created, tracking_number, carrier)
		if not isinstance(created, dict) or created.get('status') not in ('ok', 'success'):
			message = created.get('status_msg') if isinstance(created, dict) else None
			raise TrackshipError(f'Failed to create shipment: {message or created!r}')

		response = await trackship.get_shipment(
			tracking_number,
			carrier,
			body['order_id'],
			api_key=self.api_key,
			base_url=self.base_url
		)
		return normalize(response, tracking_number, carrier)


def _masked(api_key: str) -> str:
	return api_key[:10] + '...' if api_key else 'None'


def select_tracking_client(config: ClientConfig) -> TrackingClient:
	"""Choose tracking client implementation.

	Proxy wins over everything, direct API needs both the flag and the key,
	otherwise mock.
	"""
	logger.info(
		'Selecting tracking client',
		extra={'json_fields': {
			'useProxy': config.use_proxy,
			'useRealApi': config.use_real_api,
			'hasCredentials': bool(config.api_key),
			'apiKey': _masked(config.api_key),
		}}
	)

	if config.use_proxy:
		logger.info('Using proxy API service')
		return ProxyTrackingClient(config.proxy_url)

	if config.use_real_api and config.api_key:
		logger.info('Using real Trackship API (may have CORS issues)')
		return DirectTrackingClient(
			api_key=config.api_key,
			base_url=config.trackship_url,
			store_id=config.store_id,
			app_name=config.app_name,
			carrier_fallback=config.carrier_fallback
		)

	logger.info('Using mock Trackship API')
	return MockTrackingClient(delay=config.mock_delay)


async def main():
	"""For local manual testing."""
	client = select_tracking_client(ClientConfig.from_env())
	statuses = await client.get_batch_tracking_status(list(MOCK_DATA) + ['NOPE'])
	for status in statuses:
		print(status.to_dict())


if __name__ == '__main__':
	asyncio.run(main())
