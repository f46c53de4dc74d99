# -*- coding: utf-8 -*-
"""Shipment tracking proxy for the shipping dashboard."""
