# -*- coding: utf-8 -*-
"""Guesses the carrier from the shape of a tracking number.

Purely heuristic: no checksum or format validation, and plenty of real
numbers are ambiguous (any 10-character number is taken for DHL).
"""
import enum
from typing import Union


class Carrier(str, enum.Enum):
	UPS = 'ups'
	USPS = 'usps'
	DHL = 'dhl'
	FEDEX = 'fedex'
	UNKNOWN = 'unknown'

	def __str__(self):
		return self.value


# Rules are evaluated in order, first match wins.
_RULES = (
	(Carrier.UPS, ('1Z',), None),
	(Carrier.USPS, ('940', '93'), None),
	(Carrier.DHL, ('DHL',), 10),
	(Carrier.FEDEX, ('FEDEX',), 12),
)


def detect_carrier(
	tracking_number: str,
	fallback: Union[Carrier, str] = Carrier.UNKNOWN
) -> Carrier:
	"""Map tracking number to carrier tag.

	`fallback` - tag for numbers no rule matches. Historically some call sites
	used 'ups' here and others 'unknown', so it is left to configuration.
	"""
	for carrier, prefixes, length in _RULES:
		if tracking_number.startswith(prefixes) or len(tracking_number) == length:
			return carrier

	return Carrier(fallback)
