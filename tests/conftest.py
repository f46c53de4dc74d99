# -*- coding: utf-8 -*-
"""
pytest configuration.

Environment is pinned before any trackproxy module is imported: config is
read at import time.
"""
import os

os.environ['TRACKSHIP_API_KEY'] = ''
os.environ['TRACKSHIP_STORE_ID'] = 'test_store_123'
os.environ['CARRIER_FALLBACK'] = 'unknown'
os.environ['USE_PROXY_API'] = 'false'
os.environ['USE_REAL_TRACKSHIP_API'] = 'false'
os.environ['MOCK_DELAY'] = '0'
