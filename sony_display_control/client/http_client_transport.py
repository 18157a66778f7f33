# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Sony display HTTP client transport.

Provides an implementation of SonyDisplayClientTransport over httpx.
"""

from __future__ import annotations

import asyncio
import logging
import time

import httpx

from ..internal_types import *
from ..exceptions import TransportError, DeadlineExceededError, ValidationError
from ..constants import DEFAULT_TIMEOUT, DEFAULT_PSK, PSK_HEADER, SONY_API_PATH
from ..pkg_logging import logger as pkg_logger
from ..protocol import EndpointCategory, SonyRequest

from .client_transport import SonyDisplayClientTransport

class HttpSonyDisplayClientTransport(SonyDisplayClientTransport):
    """Sony display HTTP client transport.

    A single transport may be shared by any number of concurrent callers and
    displays; it holds no per-display state.
    """

    psk: str
    timeout_secs: float
    logger: logging.Logger
    _client: httpx.AsyncClient

    def __init__(
            self,
            psk: str=DEFAULT_PSK,
            timeout_secs: float=DEFAULT_TIMEOUT,
            client: Optional[httpx.AsyncClient]=None,
            logger: Optional[logging.Logger]=None,
          ) -> None:
        """Initializes the transport.

           Args:
             psk:   The pre-shared key sent in the X-Auth-PSK header.
             timeout_secs:
                    The timeout for a single HTTP exchange, in seconds.
             client:
                    An optional httpx.AsyncClient to use. If None, one is
                    created. The transport closes the client in aclose() in
                    either case.
             logger:
                    The logger to use. If None, the package logger is used.
        """
        super().__init__()
        self.psk = psk
        self.timeout_secs = timeout_secs
        self.logger = pkg_logger if logger is None else logger
        self._client = httpx.AsyncClient(timeout=timeout_secs) if client is None else client

    def endpoint_url(self, address: str, category: EndpointCategory) -> str:
        return f"http://{address}/{SONY_API_PATH}/{category.value}"

    async def _post(self, url: str, request: SonyRequest) -> bytes:
        headers = {
            "Content-Type": "application/json",
            PSK_HEADER: self.psk,
          }
        try:
            response = await self._client.post(
                url,
                content=request.encode(),
                headers=headers,
                timeout=self.timeout_secs,
              )
        except httpx.InvalidURL as e:
            raise ValidationError(f"Invalid display address in {url!r}: {e}") from e
        except httpx.TimeoutException as e:
            self.logger.warning(f"Request to {url} timed out: method={request.method}")
            raise TransportError(f"Request to {url} timed out: {e}") from e
        except httpx.HTTPError as e:
            self.logger.warning(f"Request to {url} failed: {e}")
            raise TransportError(f"Request to {url} failed: {e}") from e

        if response.status_code < 200 or response.status_code >= 300:
            raise TransportError(
                f"Display at {url} returned HTTP {response.status_code}: {response.text}",
                status_code=response.status_code,
              )
        return response.content

    # @abstractmethod
    async def post(
            self,
            address: str,
            category: EndpointCategory,
            request: SonyRequest,
            deadline: Optional[float]=None,
          ) -> bytes:
        url = self.endpoint_url(address, category)
        self.logger.debug(f"POST {url}: {request.encode().decode('utf-8')}")
        if deadline is None:
            body = await self._post(url, request)
        else:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise DeadlineExceededError(f"Deadline passed before {request.method} could be sent to {address}")
            try:
                body = await asyncio.wait_for(self._post(url, request), remaining)
            except asyncio.TimeoutError as e:
                raise DeadlineExceededError(f"Deadline passed while waiting for {request.method} response from {address}") from e
        self.logger.debug(f"Response from {url}: {body!r}")
        return body

    async def aclose(self) -> None:
        await self._client.aclose()

    def __str__(self) -> str:
        return f"HttpSonyDisplayClientTransport(timeout_secs={self.timeout_secs})"

    def __repr__(self) -> str:
        return str(self)
