# -*- coding: utf-8 -*-
from trackproxy.api.tracker.tracker import TrackingHandler
