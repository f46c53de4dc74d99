# -*- coding: utf-8 -*-
"""Low-level module for tracking info.
"""
import asyncio
import logging
from typing import Optional

from trackproxy.environs import env
from trackproxy.modules.tracker import trackship
from trackproxy.modules.tracker.carrier import detect_carrier
from trackproxy.modules.tracker.status import TrackingStatus, normalize

logger = logging.getLogger(__name__)

# Real numbers are no more than 34 characters, but just in case...
# For input validation:
TRACKING_NUMBER_MAX_LENGTH = 128


async def get_tracking_info(
	tracking_number: str,
	order_id: Optional[str] = None,
	postal_code: Optional[str] = None,
	carrier_fallback: str = env.CARRIER_FALLBACK
) -> TrackingStatus:
	"""Register shipment on Trackship and normalize its reply.

	TrackshipError will be raised if Trackship can't be reached.
	"""
	carrier = detect_carrier(tracking_number, carrier_fallback)
	body = trackship.build_create_body(
		tracking_number,
		carrier,
		order_id=order_id,
		postal_code=postal_code
	)

	response = await trackship.create_shipment(body)
	status = normalize(response, tracking_number, carrier)
	if status.error:
		logger.warning('Trackship error for %s: %s', tracking_number, status.error)

	return status


async def main():
	"""For local manual testing."""
	tracking_info = await get_tracking_info(env.TRACKING_NUMBER_DEFAULT_VALUE)
	print(tracking_info.to_dict())


if __name__ == '__main__':
	asyncio.run(main())
