# -*- coding: utf-8 -*-
"""Tests for carrier detection heuristics."""
import pytest

from trackproxy.modules.tracker.carrier import Carrier, detect_carrier


class TestDetectCarrier:

	@pytest.mark.parametrize('tracking_number, expected', [
		('1Z999AA1234567890', Carrier.UPS),
		('9400100000000000000000', Carrier.USPS),
		('9361289878700317633795', Carrier.USPS),
		('DHL888999000', Carrier.DHL),
		('1234567890', Carrier.DHL),
		('FEDEX987654321', Carrier.FEDEX),
		('123456789012', Carrier.FEDEX),
	])
	def test_documented_rules(self, tracking_number, expected):
		assert detect_carrier(tracking_number) is expected

	def test_first_match_wins(self):
		# 10 characters, but the UPS prefix is checked first.
		assert detect_carrier('1Z34567890') is Carrier.UPS
		# 12 characters starting with 93 is USPS, not FedEx.
		assert detect_carrier('930000000000') is Carrier.USPS

	def test_unknown_fallback_by_default(self):
		assert detect_carrier('ABC') is Carrier.UNKNOWN
		assert detect_carrier('') is Carrier.UNKNOWN

	def test_ups_fallback_when_configured(self):
		assert detect_carrier('ABC', fallback='ups') is Carrier.UPS
		assert detect_carrier('ABC', fallback=Carrier.UPS) is Carrier.UPS

	def test_fallback_does_not_override_matches(self):
		assert detect_carrier('1234567890', fallback='ups') is Carrier.DHL

	def test_invalid_fallback(self):
		with pytest.raises(ValueError):
			detect_carrier('ABC', fallback='pigeon')

	def test_tag_is_plain_string(self):
		assert str(Carrier.FEDEX) == 'fedex'
		assert Carrier.FEDEX == 'fedex'
