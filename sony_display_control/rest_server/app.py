#!/usr/bin/env python3

# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
A REST FastAPI server that controls Sony displays.

Serve with any ASGI server, e.g.:

    uvicorn sony_display_control.rest_server:display_api
"""

from __future__ import annotations

from fastapi import FastAPI

import time
import os
import json

from contextlib import asynccontextmanager

from .logger import logger
from ..internal_types import *
from ..exceptions import SonyDisplayError
from .. import (
    __version__ as pkg_version,
    SonyDisplayClientConfig,
    SonyDisplayClientTransport,
    HttpSonyDisplayClientTransport,
  )

from .api import router as api_router

def load_raw_config() -> JsonableDict:
    """Loads the server configuration from the file named by SONY_DISPLAY_CONFIG,
       or from sony_display_config.json in the current directory. Returns an empty
       configuration if there is neither."""
    config_file = os.environ.get("SONY_DISPLAY_CONFIG", None)
    if config_file is None:
        if os.path.exists("sony_display_config.json"):
            config_file = "sony_display_config.json"
    if config_file is None:
        return {}
    with open(config_file, "r") as f:
        raw_config = json.load(f)
    if not isinstance(raw_config, dict):
        raise SonyDisplayError(f"Configuration file {config_file} does not contain a JSON object")
    return raw_config

@asynccontextmanager
async def fastapi_lifetime(app: FastAPI) -> AsyncIterator[None]:
    """
    A context manager that initializes and cleans up for FastAPI.
    """

    transport: Optional[SonyDisplayClientTransport] = None
    try:
        logger.info(f"Sony display REST server v{pkg_version} starting up--initializing...")
        raw_config = load_raw_config()
        app.state.raw_config = raw_config
        display_config = SonyDisplayClientConfig.from_jsonable(raw_config)
        app.state.display_config = display_config
        app.state.launch_time = time.monotonic()
        transport = HttpSonyDisplayClientTransport(
            psk=display_config.psk,
            timeout_secs=display_config.timeout_secs,
          )
        app.state.display_transport = transport
        logger.info(f"Serving API with {display_config}...")

        logger.info("Sony display REST server initialization done; starting server...")
        yield
    finally:
        logger.info("Sony display REST server shutting down--cleaning up...")
        if transport is not None:
            await transport.aclose()

display_api = FastAPI(lifespan=fastapi_lifetime)
display_api.include_router(api_router)
