# -*- coding: utf-8 -*-
"""Internal tracking status and normalization of Trackship replies.

Trackship replies come in three shapes that we care about:
 - general error with `status_msg` == 'missing_store' (store is not set up
   on Trackship side): degraded status with `error` tag;
 - success with `data` payload: fields copied, defaults for missing ones;
 - anything else (other errors, garbage, non-JSON text): "unavailable".

The raw reply is always attached as is, for diagnostics only.
"""
import dataclasses
import datetime
import enum
from typing import Any, Optional, Union

import voluptuous as vlps

from trackproxy.modules.tracker.carrier import Carrier


MISSING_STORE = 'missing_store'


class ShipmentState(str, enum.Enum):
	PENDING = 'pending'
	SHIPPED = 'shipped'
	DELIVERED = 'delivered'

	def __str__(self):
		return self.value


# Trackship status codes we can map with confidence.
_STATES = {
	'pending': ShipmentState.PENDING,
	'shipped': ShipmentState.SHIPPED,
	'delivered': ShipmentState.DELIVERED,
	'in_transit': ShipmentState.SHIPPED,
	'picked_up': ShipmentState.SHIPPED,
	'out_for_delivery': ShipmentState.SHIPPED,
	'available_for_pickup': ShipmentState.SHIPPED,
}


def utc_now_iso() -> str:
	"""Current UTC time with milliseconds: '2024-01-20T10:00:00.000Z'."""
	now = datetime.datetime.now(datetime.timezone.utc)
	return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def parse_state(status: Optional[str]) -> ShipmentState:
	"""Coerce upstream status code into one of our three states.

	Only the `status` code is looked at, never free-text description.
	Unrecognized values always end up as pending.
	"""
	return _STATES.get((status or '').strip().lower(), ShipmentState.PENDING)


@dataclasses.dataclass
class TrackingStatus:
	tracking_number: str
	status: ShipmentState
	last_activity: str
	status_description: str
	estimated_delivery: Optional[str] = None
	current_location: Optional[str] = None
	carrier: Optional[str] = None
	error: Optional[str] = None
	# Raw upstream reply, never interpreted.
	trackship_response: Any = None

	# Wire names of the fields. Not annotated, so not a dataclass field.
	_KEYS = {
		'tracking_number': 'trackingNumber',
		'status': 'status',
		'last_activity': 'lastActivity',
		'status_description': 'statusDescription',
		'estimated_delivery': 'estimatedDelivery',
		'current_location': 'currentLocation',
		'carrier': 'carrier',
		'error': 'error',
		'trackship_response': 'trackshipResponse',
	}

	def to_dict(self) -> dict:
		"""camelCase representation, absent optional fields are omitted."""
		result = {}
		for field in dataclasses.fields(self):
			value = getattr(self, field.name)
			if value is None:
				continue
			if isinstance(value, enum.Enum):
				value = value.value
			result[self._KEYS[field.name]] = value

		return result

	@classmethod
	def from_dict(cls, data: dict) -> 'TrackingStatus':
		"""Build from camelCase representation (e.g. proxy reply)."""
		kwargs = {
			name: data.get(key)
			for name, key in cls._KEYS.items()
		}
		kwargs['tracking_number'] = kwargs['tracking_number'] or ''
		kwargs['status'] = parse_state(kwargs['status'])
		kwargs['last_activity'] = kwargs['last_activity'] or ''
		kwargs['status_description'] = kwargs['status_description'] or ''

		return cls(**kwargs)


class ResponseKind(str, enum.Enum):
	MISSING_STORE = 'missing_store'
	SUCCESS = 'success'
	UNAVAILABLE = 'unavailable'


_OPTIONAL_TEXT = vlps.Any(None, str)

# Describe only keys we are using, everything else is kept in the raw reply.
_MISSING_STORE_SCHEMA = vlps.Schema(
	{
		vlps.Required('status'): 'error',
		vlps.Required('status_msg'): MISSING_STORE,
	},
	extra=vlps.ALLOW_EXTRA
)

_SUCCESS_DATA_SCHEMA = vlps.Schema(
	{
		vlps.Optional('status'): _OPTIONAL_TEXT,
		vlps.Optional('last_activity'): _OPTIONAL_TEXT,
		vlps.Optional('estimated_delivery'): _OPTIONAL_TEXT,
		vlps.Optional('current_location'): _OPTIONAL_TEXT,
		vlps.Optional('status_description'): _OPTIONAL_TEXT,
		vlps.Optional('carrier'): _OPTIONAL_TEXT,
	},
	extra=vlps.REMOVE_EXTRA
)

_SUCCESS_SCHEMA = vlps.Schema(
	{
		vlps.Required('status'): 'success',
		vlps.Required('data'): vlps.All(dict, _SUCCESS_DATA_SCHEMA),
	},
	extra=vlps.ALLOW_EXTRA
)


def classify_response(response: Any) -> tuple[ResponseKind, Optional[dict]]:
	"""Tell which shape upstream reply has.

	Returns the kind and, for SUCCESS, validated `data` payload.
	"""
	if not isinstance(response, dict):
		return ResponseKind.UNAVAILABLE, None

	try:
		_MISSING_STORE_SCHEMA(response)
	except vlps.Invalid:
		pass
	else:
		return ResponseKind.MISSING_STORE, None

	try:
		validated = _SUCCESS_SCHEMA(response)
	except vlps.Invalid:
		return ResponseKind.UNAVAILABLE, None

	return ResponseKind.SUCCESS, validated['data']


def normalize(
	response: Any,
	tracking_number: str,
	fallback_carrier: Union[Carrier, str]
) -> TrackingStatus:
	"""Build TrackingStatus from raw Trackship reply."""
	kind, data = classify_response(response)
	carrier = str(fallback_carrier).upper()

	if kind is ResponseKind.MISSING_STORE:
		return TrackingStatus(
			tracking_number=tracking_number,
			status=ShipmentState.PENDING,
			last_activity=utc_now_iso(),
			current_location='Store not configured',
			status_description='Store setup required in Trackship',
			carrier=carrier,
			error=MISSING_STORE,
			trackship_response=response,
		)

	if kind is ResponseKind.SUCCESS:
		# Empty strings fall back to defaults too.
		return TrackingStatus(
			tracking_number=tracking_number,
			status=parse_state(data.get('status')),
			last_activity=data.get('last_activity') or utc_now_iso(),
			estimated_delivery=data.get('estimated_delivery') or None,
			current_location=data.get('current_location') or 'Unknown',
			status_description=data.get('status_description') or 'Tracking available',
			carrier=data.get('carrier') or carrier,
			trackship_response=response,
		)

	return TrackingStatus(
		tracking_number=tracking_number,
		status=ShipmentState.PENDING,
		last_activity=utc_now_iso(),
		current_location='Unknown',
		status_description='Tracking data unavailable',
		carrier=carrier,
		trackship_response=response,
	)


def unavailable_placeholder(tracking_number: str) -> TrackingStatus:
	"""Stand-in for a batch member whose lookup failed."""
	return TrackingStatus(
		tracking_number=tracking_number,
		status=ShipmentState.PENDING,
		last_activity='',
		status_description='Tracking unavailable',
	)
