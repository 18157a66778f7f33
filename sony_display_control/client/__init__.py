# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Sony display client.

Provides capability operations for a Sony display over its HTTP control API.
"""

from .resolve_host import resolve_display_hostname
from .client_config import SonyDisplayClientConfig
from .client_transport import SonyDisplayClientTransport
from .http_client_transport import HttpSonyDisplayClientTransport
from .confirm import wait_for_state, retry_until_confirmed
from .client_impl import (
    SonyDisplayClient,
    parse_power_status,
  )
