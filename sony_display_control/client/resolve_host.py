# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Sony display hostname resolver.

Provides a method that reverse-resolves a display address into a hostname
for reporting purposes.
"""

from __future__ import annotations

import asyncio
import socket

from ..internal_types import *
from ..pkg_logging import logger

async def resolve_display_hostname(address: str) -> str:
    """Returns the hostname registered in reverse DNS for a display address.

        Args:
            address: The hostname or IPV4 address of the display.

        Returns:
            The resolved hostname, without any trailing ".". If the lookup
            fails for any reason, address itself is returned. This function
            never raises an exception for lookup failures.
    """
    loop = asyncio.get_running_loop()
    try:
        hostname, _ = await loop.getnameinfo((address, 0), socket.NI_NAMEREQD)
    except (OSError, UnicodeError) as e:
        logger.debug(f"Reverse lookup of {address} failed; using address as hostname: {e}")
        return address
    hostname = hostname.strip('.')
    if hostname == '':
        return address
    return hostname
