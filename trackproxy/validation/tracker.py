# -*- coding: utf-8 -*-
"""Module with validations schemas for client tracker requests.
"""
import voluptuous as vlps

from trackproxy.modules.tracker.tracker import TRACKING_NUMBER_MAX_LENGTH

_OPTIONAL_TEXT = vlps.Any(None, str)

# Used to validate TrackingHandler.post request.
TRACKING_REQUEST_SCHEMA = vlps.Schema(
	{
		vlps.Required('trackingNumber'): vlps.All(
			str,
			vlps.Length(min=1, max=TRACKING_NUMBER_MAX_LENGTH)
		),
		vlps.Optional('orderId'): _OPTIONAL_TEXT,
		vlps.Optional('postalCode'): _OPTIONAL_TEXT,
	},
	extra=vlps.REMOVE_EXTRA
)
