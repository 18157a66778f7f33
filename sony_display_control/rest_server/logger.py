#!/usr/bin/env python3

# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Logger for the REST FastAPI server that controls Sony displays.
"""

from __future__ import annotations

import logging

logger = logging.getLogger('sony_display_control.rest_server')
