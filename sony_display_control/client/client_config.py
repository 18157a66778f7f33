# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Sony display client configuration.

Provides a general config object shared by the client transport, the
capability operations and the REST server.
"""

from __future__ import annotations

import os

from ..internal_types import *
from ..exceptions import SonyDisplayError
from ..constants import (
    DEFAULT_TIMEOUT,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_PSK,
    POWER_TIMEOUT,
    POWER_POLL_INTERVAL,
    MUTE_RETRIES,
    MUTE_RETRY_DELAY,
    DEFAULT_NETWORK_INTERFACE,
  )

def _env_float(name: str, default: float) -> float:
    value_str = os.environ.get(name)
    if value_str is None or value_str == '':
        return default
    try:
        return float(value_str)
    except ValueError as e:
        raise SonyDisplayError(f"Environment variable {name} is not a number: {value_str!r}") from e

class SonyDisplayClientConfig:
    """Sony display client configuration."""
    psk: str
    timeout_secs: float
    request_timeout_secs: float
    power_timeout_secs: float
    power_poll_interval: float
    mute_retries: int
    mute_retry_delay: float
    network_interface: str

    def __init__(
            self,
            psk: Optional[str]=None,
            *,
            timeout_secs: Optional[float]=None,
            request_timeout_secs: Optional[float]=None,
            power_timeout_secs: Optional[float]=None,
            power_poll_interval: Optional[float]=None,
            mute_retries: Optional[int]=None,
            mute_retry_delay: Optional[float]=None,
            network_interface: Optional[str]=None,
            base_config: Optional[SonyDisplayClientConfig]=None
          ) -> None:
        """Creates a configuration for a Sony display client.

           Args:
             psk:
                   The pre-shared key configured on the display, sent in the
                   X-Auth-PSK header. If None, the key will be taken from the
                   SONY_DISPLAY_PSK environment variable. If that is not found,
                   DEFAULT_PSK is used.
             timeout_secs:
                   The timeout for a single HTTP exchange, in seconds.
                   If None, the timeout will be taken from the
                   SONY_DISPLAY_TIMEOUT environment variable.
                   If the environment variable is not found, the
                   default timeout will be used.
             request_timeout_secs:
                   The deadline applied by the REST server to a complete
                   operation, including confirmation loops, in seconds.
                   If None, taken from SONY_DISPLAY_REQUEST_TIMEOUT, then
                   DEFAULT_REQUEST_TIMEOUT.
             power_timeout_secs:
                   How long to wait for the display to report the requested
                   power state after a power command, in seconds.
             power_poll_interval:
                   Seconds between power status polls.
             mute_retries:
                   Number of times a mute command is re-sent after the first
                   attempt fails to stick.
             mute_retry_delay:
                   Seconds to wait between mute attempts.
             network_interface:
                   The display network interface reported in hardware info.
             base_config:
                     An optional base configuration to use.
        """
        if base_config is None:
            self.init_from_defaults()
        else:
            self.init_from_base_config(base_config)

        if psk is not None and psk != '':
            self.psk = psk

        if timeout_secs is not None:
            self.timeout_secs = timeout_secs

        if request_timeout_secs is not None:
            self.request_timeout_secs = request_timeout_secs

        if power_timeout_secs is not None:
            self.power_timeout_secs = power_timeout_secs

        if power_poll_interval is not None:
            self.power_poll_interval = power_poll_interval

        if mute_retries is not None:
            if mute_retries < 0:
                raise SonyDisplayError(f"mute_retries must not be negative: {mute_retries}")
            self.mute_retries = mute_retries

        if mute_retry_delay is not None:
            self.mute_retry_delay = mute_retry_delay

        if network_interface is not None and network_interface != '':
            self.network_interface = network_interface

    def init_from_defaults(self) -> None:
        """Initializes the configuration from defaults."""
        psk = os.environ.get('SONY_DISPLAY_PSK')
        if psk is None or psk == '':
            psk = DEFAULT_PSK
        self.psk = psk
        self.timeout_secs = _env_float('SONY_DISPLAY_TIMEOUT', DEFAULT_TIMEOUT)
        self.request_timeout_secs = _env_float('SONY_DISPLAY_REQUEST_TIMEOUT', DEFAULT_REQUEST_TIMEOUT)
        self.power_timeout_secs = POWER_TIMEOUT
        self.power_poll_interval = POWER_POLL_INTERVAL
        self.mute_retries = MUTE_RETRIES
        self.mute_retry_delay = MUTE_RETRY_DELAY
        self.network_interface = DEFAULT_NETWORK_INTERFACE

    def init_from_base_config(self, base_config: SonyDisplayClientConfig) -> None:
        """Initializes the configuration from a base configuration."""
        self.psk = base_config.psk
        self.timeout_secs = base_config.timeout_secs
        self.request_timeout_secs = base_config.request_timeout_secs
        self.power_timeout_secs = base_config.power_timeout_secs
        self.power_poll_interval = base_config.power_poll_interval
        self.mute_retries = base_config.mute_retries
        self.mute_retry_delay = base_config.mute_retry_delay
        self.network_interface = base_config.network_interface

    @classmethod
    def from_jsonable(cls, obj: JsonableDict) -> SonyDisplayClientConfig:
        """Creates a configuration from a JSON object. Missing keys use defaults."""
        known_keys = (
            'psk',
            'timeout_secs',
            'request_timeout_secs',
            'power_timeout_secs',
            'power_poll_interval',
            'mute_retries',
            'mute_retry_delay',
            'network_interface',
          )
        for key in obj:
            if not key in known_keys:
                raise SonyDisplayError(f"Unknown configuration key: {key}")
        kwargs: Dict[str, Any] = dict(obj)
        psk = kwargs.pop('psk', None)
        return cls(psk, **kwargs)

    def to_jsonable(self) -> JsonableDict:
        return {
            'psk': self.psk,
            'timeout_secs': self.timeout_secs,
            'request_timeout_secs': self.request_timeout_secs,
            'power_timeout_secs': self.power_timeout_secs,
            'power_poll_interval': self.power_poll_interval,
            'mute_retries': self.mute_retries,
            'mute_retry_delay': self.mute_retry_delay,
            'network_interface': self.network_interface,
          }

    def __str__(self) -> str:
        return (
            f"SonyDisplayClientConfig("
            f"timeout_secs={self.timeout_secs!r}, "
            f"request_timeout_secs={self.request_timeout_secs!r})"
          )

    def __repr__(self) -> str:
        return str(self)
