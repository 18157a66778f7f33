# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Sony display client abstract transport interface.

Provides a low-level abstract interface for posting encoded request envelopes
to a display and receiving the raw response body. Does not interpret
responses.

This abstraction allows for the implementation of proxies, alternate HTTP
stacks and test doubles.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..internal_types import *
from ..protocol import EndpointCategory, SonyRequest


class SonyDisplayClientTransport(ABC):
    @abstractmethod
    async def post(
            self,
            address: str,
            category: EndpointCategory,
            request: SonyRequest,
            deadline: Optional[float]=None,
          ) -> bytes:
        """Posts an encoded request to http://<address>/sony/<category> and returns
        the raw response body.

        deadline is an absolute time.monotonic() value. If it passes before the
        exchange completes, DeadlineExceededError is raised.

        Raises TransportError on network failure or a non-2xx status.

        Must be implemented by subclasses.
        """
        raise NotImplementedError()

    async def aclose(self) -> None:
        """Releases any resources held by the transport.

        May be overridden by subclasses. The default implementation does nothing.
        """
        pass

    async def __aenter__(self) -> Self:
        """Enters a context that will close the transport on exit."""
        return self

    async def __aexit__(
            self,
            exc_type: Optional[Type[BaseException]],
            exc: Optional[BaseException],
            tb: Optional[TracebackType],
          ) -> None:
        await self.aclose()
