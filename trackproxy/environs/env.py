# -*- coding: utf-8 -*-
"""'Externally' adjustable config vars.

Values are read once at import time, after `.env` (if any) is loaded.
"""
from os import environ

from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = 'false') -> bool:
	return environ.get(name, default).strip().lower() in ('1', 'true', 'yes')


# Local proxy port, the dashboard expects it on 3001.
PORT = int(environ['PORT']) if 'PORT' in environ else 3001

LOG_LEVEL = environ.get('LOG_LEVEL', 'INFO').upper()

TRACKING_NUMBER_DEFAULT_VALUE = environ.get('TRACKING_NUMBER_DEFAULT_VALUE', '1Z999AA1234567890')

# Everything for tracking through Trackship.
TRACKSHIP_URL = environ.get('TRACKSHIP_URL', 'https://api.trackship.com/v1').rstrip('/')
TRACKSHIP_API_KEY = environ.get('TRACKSHIP_API_KEY', '')
TRACKSHIP_STORE_ID = environ.get('TRACKSHIP_STORE_ID', 'test_store_123')
TRACKSHIP_APP_NAME = environ.get('TRACKSHIP_APP_NAME', 'Workspace Shipping Dashboard')

# Carrier reported for numbers no detection rule matches: 'unknown' or 'ups'.
CARRIER_FALLBACK = environ.get('CARRIER_FALLBACK', 'unknown').strip().lower()

# Which tracking client the dashboard side uses.
USE_PROXY_API = _flag('USE_PROXY_API')
USE_REAL_TRACKSHIP_API = _flag('USE_REAL_TRACKSHIP_API')
PROXY_API_URL = environ.get('PROXY_API_URL', 'http://localhost:3001/api').rstrip('/')
MOCK_DELAY = float(environ.get('MOCK_DELAY', '1.0'))

if CARRIER_FALLBACK not in ('unknown', 'ups', 'usps', 'dhl', 'fedex'):
	raise ValueError(f'CARRIER_FALLBACK should be a carrier tag, got {CARRIER_FALLBACK!r}')
