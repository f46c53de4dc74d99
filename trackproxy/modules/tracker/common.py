# -*- coding: utf-8 -*-
"""Separate file for base exception class(es) to avoid circular import.
"""


class CarrierTrackingError(Exception):
	"""Base class for all upstream tracking errors."""
	pass


class TrackshipError(CarrierTrackingError):
	"""Trackship could not be reached or replied with something unusable."""
	pass


class TrackingClientError(CarrierTrackingError):
	"""Tracking client got an unsuccessful reply."""
	pass
