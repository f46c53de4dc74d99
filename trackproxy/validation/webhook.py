# -*- coding: utf-8 -*-
"""Module with validations schemas for Trackship webhook pushes.

Only keys we log are described; the sender's schema may grow, so extra keys
are kept and nothing here is used to reject a push.
"""
import voluptuous as vlps

_SCALAR = vlps.Any(None, str, int)

WEBHOOK_SCHEMA = vlps.Schema(
	{
		vlps.Optional('user_key'): _SCALAR,
		vlps.Optional('order_id'): _SCALAR,
		vlps.Optional('tracking_number'): _SCALAR,
		vlps.Optional('tracking_provider'): _SCALAR,
		vlps.Optional('tracking_event_status'): _SCALAR,
		vlps.Optional('events', default=list): vlps.Any(None, list),
	},
	extra=vlps.ALLOW_EXTRA
)
