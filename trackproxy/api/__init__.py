# -*- coding: utf-8 -*-
from trackproxy.api import healthcheck, tracker, version, webhook
