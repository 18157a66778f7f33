#!/usr/bin/env python3

# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
REST API routes for controlling Sony displays.

Every route is addressed by the display's hostname or IP address as the first
path segment.
"""

from __future__ import annotations

import re
import time

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from .logger import logger
from ..internal_types import *
from ..exceptions import SonyDisplayError, ValidationError
from ..status import StatusValue
from .. import (
    SonyDisplayClient,
    SonyDisplayClientConfig,
    SonyDisplayClientTransport,
  )

router = APIRouter()

VOLUME_RE = re.compile(r"[+-]?[0-9]+")
"""Decimal integer volume in a path segment; ASCII digits only, no separators or whitespace."""

def get_display_transport(request: Request) -> SonyDisplayClientTransport:
    return request.app.state.display_transport

def get_display_config(request: Request) -> SonyDisplayClientConfig:
    return request.app.state.display_config

def status_code_for_error(e: SonyDisplayError) -> int:
    """Returns the HTTP status used to report an error to REST callers."""
    if isinstance(e, ValidationError):
        return 400
    return 500

def error_response(e: SonyDisplayError) -> JSONResponse:
    return JSONResponse(status_code=status_code_for_error(e), content=str(e))

async def run_operation(
        address: str,
        transport: SonyDisplayClientTransport,
        config: SonyDisplayClientConfig,
        description: str,
        operation: Callable[[SonyDisplayClient, float], Awaitable[StatusValue]],
      ) -> JSONResponse:
    """Runs a client operation against a display, bounded by the configured
       request deadline, and converts the result or error into a response."""
    client = SonyDisplayClient(address, transport, config=config, logger=logger)
    deadline = time.monotonic() + config.request_timeout_secs
    logger.debug(f"{description} for {address}...")
    try:
        result = await operation(client, deadline)
    except SonyDisplayError as e:
        logger.error(f"Failed to {description} for {address}: {e}")
        return error_response(e)
    logger.debug(f"{description} for {address}: {result}")
    return JSONResponse(content=result.to_jsonable())

# ---- power

@router.get("/{address}/power/on")
async def power_on(
        address: str,
        transport: SonyDisplayClientTransport = Depends(get_display_transport),
        config: SonyDisplayClientConfig = Depends(get_display_config),
      ) -> JSONResponse:
    return await run_operation(
        address, transport, config, "power on",
        lambda client, deadline: client.set_power(True, deadline=deadline))

@router.get("/{address}/power/standby")
async def power_standby(
        address: str,
        transport: SonyDisplayClientTransport = Depends(get_display_transport),
        config: SonyDisplayClientConfig = Depends(get_display_config),
      ) -> JSONResponse:
    return await run_operation(
        address, transport, config, "power off",
        lambda client, deadline: client.set_power(False, deadline=deadline))

@router.get("/{address}/power/status")
async def power_status(
        address: str,
        transport: SonyDisplayClientTransport = Depends(get_display_transport),
        config: SonyDisplayClientConfig = Depends(get_display_config),
      ) -> JSONResponse:
    return await run_operation(
        address, transport, config, "get power status",
        lambda client, deadline: client.get_power(deadline=deadline))

# ---- inputs. Fixed paths must be registered before /input/{port}.

@router.get("/{address}/input/current")
async def input_current(
        address: str,
        transport: SonyDisplayClientTransport = Depends(get_display_transport),
        config: SonyDisplayClientConfig = Depends(get_display_config),
      ) -> JSONResponse:
    return await run_operation(
        address, transport, config, "get input",
        lambda client, deadline: client.get_input(deadline=deadline))

@router.get("/{address}/input/list")
async def input_list(
        address: str,
        transport: SonyDisplayClientTransport = Depends(get_display_transport),
        config: SonyDisplayClientConfig = Depends(get_display_config),
      ) -> JSONResponse:
    return await run_operation(
        address, transport, config, "get input list",
        lambda client, deadline: client.get_input_list(deadline=deadline))

@router.get("/{address}/input/{port}")
async def switch_input(
        address: str,
        port: str,
        transport: SonyDisplayClientTransport = Depends(get_display_transport),
        config: SonyDisplayClientConfig = Depends(get_display_config),
      ) -> JSONResponse:
    return await run_operation(
        address, transport, config, f"switch input to {port}",
        lambda client, deadline: client.switch_input(port, deadline=deadline))

@router.get("/{address}/active/{port}")
async def active_signal(
        address: str,
        port: str,
        transport: SonyDisplayClientTransport = Depends(get_display_transport),
        config: SonyDisplayClientConfig = Depends(get_display_config),
      ) -> JSONResponse:
    return await run_operation(
        address, transport, config, "get active signal",
        lambda client, deadline: client.get_active_signal(port, deadline=deadline))

# ---- audio

@router.get("/{address}/volume/set/{value}")
async def set_volume(
        address: str,
        value: str,
        transport: SonyDisplayClientTransport = Depends(get_display_transport),
        config: SonyDisplayClientConfig = Depends(get_display_config),
      ) -> JSONResponse:
    if VOLUME_RE.fullmatch(value) is None:
        return error_response(ValidationError(f"volume must be an integer from 0 to 100: {value!r}"))
    volume = int(value)
    return await run_operation(
        address, transport, config, f"set volume to {volume}",
        lambda client, deadline: client.set_volume(volume, deadline=deadline))

@router.get("/{address}/volume/level")
async def volume_level(
        address: str,
        transport: SonyDisplayClientTransport = Depends(get_display_transport),
        config: SonyDisplayClientConfig = Depends(get_display_config),
      ) -> JSONResponse:
    return await run_operation(
        address, transport, config, "get volume",
        lambda client, deadline: client.get_volume(deadline=deadline))

@router.get("/{address}/volume/mute")
async def volume_mute(
        address: str,
        transport: SonyDisplayClientTransport = Depends(get_display_transport),
        config: SonyDisplayClientConfig = Depends(get_display_config),
      ) -> JSONResponse:
    return await run_operation(
        address, transport, config, "mute",
        lambda client, deadline: client.set_mute(True, deadline=deadline))

@router.get("/{address}/volume/unmute")
async def volume_unmute(
        address: str,
        transport: SonyDisplayClientTransport = Depends(get_display_transport),
        config: SonyDisplayClientConfig = Depends(get_display_config),
      ) -> JSONResponse:
    return await run_operation(
        address, transport, config, "unmute",
        lambda client, deadline: client.set_mute(False, deadline=deadline))

@router.get("/{address}/volume/mute/status")
async def mute_status(
        address: str,
        transport: SonyDisplayClientTransport = Depends(get_display_transport),
        config: SonyDisplayClientConfig = Depends(get_display_config),
      ) -> JSONResponse:
    return await run_operation(
        address, transport, config, "get mute status",
        lambda client, deadline: client.get_mute(deadline=deadline))

# ---- picture blanking

@router.get("/{address}/display/blank")
async def display_blank(
        address: str,
        transport: SonyDisplayClientTransport = Depends(get_display_transport),
        config: SonyDisplayClientConfig = Depends(get_display_config),
      ) -> JSONResponse:
    return await run_operation(
        address, transport, config, "blank display",
        lambda client, deadline: client.blank_display(deadline=deadline))

@router.get("/{address}/display/unblank")
async def display_unblank(
        address: str,
        transport: SonyDisplayClientTransport = Depends(get_display_transport),
        config: SonyDisplayClientConfig = Depends(get_display_config),
      ) -> JSONResponse:
    return await run_operation(
        address, transport, config, "unblank display",
        lambda client, deadline: client.unblank_display(deadline=deadline))

@router.get("/{address}/display/status")
async def display_status(
        address: str,
        transport: SonyDisplayClientTransport = Depends(get_display_transport),
        config: SonyDisplayClientConfig = Depends(get_display_config),
      ) -> JSONResponse:
    return await run_operation(
        address, transport, config, "get blank status",
        lambda client, deadline: client.get_blanked(deadline=deadline))

# ---- hardware identity

@router.get("/{address}/hardware")
async def hardware_info(
        address: str,
        transport: SonyDisplayClientTransport = Depends(get_display_transport),
        config: SonyDisplayClientConfig = Depends(get_display_config),
      ) -> JSONResponse:
    return await run_operation(
        address, transport, config, "get hardware info",
        lambda client, deadline: client.get_hardware_info(deadline=deadline))
