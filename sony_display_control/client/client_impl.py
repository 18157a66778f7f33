# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Sony display client.

Provides one async operation per display capability (power, input, volume,
mute, blanking, hardware identity) on top of a SonyDisplayClientTransport.
"""

from __future__ import annotations

import logging

from ..internal_types import *
from ..exceptions import ProtocolError, ValidationError
from ..constants import (
    SPEAKER_TARGET,
    HEADPHONE_TARGET,
    PICTURE_OFF_MODE,
    PICTURE_ON_MODE,
  )
from ..pkg_logging import logger as pkg_logger
from ..protocol import (
    SonyRequest,
    SonyResponse,
    MethodParams,
    PowerStatusParams,
    PlayContentParams,
    AudioVolumeParams,
    AudioMuteParams,
    PowerSavingModeParams,
    NetworkSettingsParams,
    INPUT_URI_RE,
    uri_to_input_id,
  )
from ..status import (
    POWER_ON,
    POWER_STANDBY,
    Power,
    Input,
    InputList,
    ActiveSignal,
    Volume,
    Mute,
    Blanked,
    NetworkInfo,
    HardwareInfo,
  )

from .client_config import SonyDisplayClientConfig
from .client_transport import SonyDisplayClientTransport
from .confirm import wait_for_state, retry_until_confirmed
from .resolve_host import resolve_display_hostname

def parse_power_status(text: str) -> Power:
    """Interprets a raw getPowerStatus response body.

    The status may be embedded in other text, so this is a substring match:
    "active" means on, "standby" means standby.

    Raises ProtocolError if neither is present.
    """
    if "active" in text:
        return Power(POWER_ON)
    if "standby" in text:
        return Power(POWER_STANDBY)
    raise ProtocolError(f"could not determine power status: {text!r}")

def _speaker_entry(response: SonyResponse) -> Dict[str, Any]:
    """Finds the speaker entry in a getVolumeInformation response.
    Headphone entries are ignored."""
    for outer in response.result:
        if not isinstance(outer, list):
            raise ProtocolError(f"Unexpected volume information shape: {outer!r}")
        for entry in outer:
            if isinstance(entry, dict) and entry.get("target") == SPEAKER_TARGET:
                return entry
    raise ProtocolError(f"No {SPEAKER_TARGET} entry in volume information: {response.result!r}")

def _record_list(response: SonyResponse) -> List[Dict[str, Any]]:
    """Returns result[0] of a response whose first result is a list of records"""
    records = response.first_result()
    if not isinstance(records, list):
        raise ProtocolError(f"Expected a list of records, got: {records!r}")
    return [r for r in records if isinstance(r, dict)]

def _record(response: SonyResponse) -> Dict[str, Any]:
    """Returns result[0] of a response whose first result is a single record"""
    record = response.first_result()
    if not isinstance(record, dict):
        raise ProtocolError(f"Expected a record, got: {record!r}")
    return record

class SonyDisplayClient:
    """Sony display client bound to a single display address.

    The client holds no state between calls and may be used concurrently.
    Every operation accepts an optional absolute time.monotonic() deadline that
    bounds the whole operation, including confirmation loops.
    """

    address: str
    transport: SonyDisplayClientTransport
    config: SonyDisplayClientConfig
    logger: logging.Logger

    def __init__(
            self,
            address: str,
            transport: SonyDisplayClientTransport,
            config: Optional[SonyDisplayClientConfig]=None,
            logger: Optional[logging.Logger]=None,
          ):
        self.address = address
        self.transport = transport
        self.config = SonyDisplayClientConfig() if config is None else config
        self.logger = pkg_logger if logger is None else logger

    async def transact_raw(
            self,
            method_name: str,
            params: Optional[MethodParams]=None,
            deadline: Optional[float]=None,
          ) -> Tuple[SonyResponse, bytes]:
        """Sends a request and returns the checked response along with the raw body."""
        request = SonyRequest.create(method_name, params)
        body = await self.transport.post(self.address, request.category, request, deadline=deadline)
        response = SonyResponse.decode(body, expect_result=request.method_meta.has_result)
        return response, body

    async def transact(
            self,
            method_name: str,
            params: Optional[MethodParams]=None,
            deadline: Optional[float]=None,
          ) -> SonyResponse:
        """Sends a request and returns the checked response.

        Raises TransportError or ProtocolError.
        """
        response, _ = await self.transact_raw(method_name, params, deadline=deadline)
        return response

    # ---- power

    async def get_power(self, deadline: Optional[float]=None) -> Power:
        _, body = await self.transact_raw("getPowerStatus", deadline=deadline)
        return parse_power_status(body.decode('utf-8', errors='replace'))

    async def set_power(self, on: bool, deadline: Optional[float]=None) -> Power:
        """Turns the display on or puts it in standby, and waits until the display
        reports the new power state.

        Raises ConfirmationTimeoutError if the state is not reported within
        config.power_timeout_secs (or before deadline).
        """
        self.logger.info(f"Setting power of {self.address} to {on}")
        await self.transact("setPowerStatus", PowerStatusParams(on), deadline=deadline)
        target = Power(POWER_ON if on else POWER_STANDBY)
        return await wait_for_state(
            lambda: self.get_power(deadline=deadline),
            target,
            timeout_secs=self.config.power_timeout_secs,
            poll_interval=self.config.power_poll_interval,
            description=f"display power of {self.address}",
            deadline=deadline,
            logger=self.logger,
          )

    # ---- inputs

    async def switch_input(self, port: str, deadline: Optional[float]=None) -> Input:
        """Selects an external input, e.g. "hdmi!2".

        Raises ValidationError before any request is sent if port is malformed.
        """
        params = PlayContentParams.from_input(port)
        self.logger.debug(f"Switching input for {self.address} to {port}")
        await self.transact("setPlayContent", params, deadline=deadline)
        return Input(port)

    async def get_input(self, deadline: Optional[float]=None) -> Input:
        """Returns the input currently shown. A display that is not on has no
        current input, and an empty Input is returned."""
        power = await self.get_power(deadline=deadline)
        if not power.is_on:
            return Input()
        response = await self.transact("getPlayingContentInfo", deadline=deadline)
        uri = _record(response).get("uri")
        if not isinstance(uri, str):
            raise ProtocolError(f"No content URI in playing content info: {response.result!r}")
        result = Input(uri_to_input_id(uri))
        self.logger.info(f"Current Input for {self.address}: {result.input}")
        return result

    async def get_input_list(self, deadline: Optional[float]=None) -> InputList:
        """Returns the identifiers of all external inputs the display reports."""
        response = await self.transact("getCurrentExternalInputsStatus", deadline=deadline)
        inputs: List[str] = []
        for record in _record_list(response):
            uri = record.get("uri")
            # skips CEC devices such as "extInput:cec?type=player&port=3"
            if isinstance(uri, str) and INPUT_URI_RE.fullmatch(uri):
                inputs.append(uri_to_input_id(uri))
        return InputList(inputs)

    async def get_active_signal(self, port: str, deadline: Optional[float]=None) -> ActiveSignal:
        """Reports whether port is the input whose signal the display reports as active."""
        response = await self.transact("getCurrentExternalInputsStatus", deadline=deadline)
        for record in _record_list(response):
            if record.get("status") == "true":
                uri = record.get("uri")
                if not isinstance(uri, str):
                    raise ProtocolError(f"No URI in external input status: {record!r}")
                return ActiveSignal(uri_to_input_id(uri) == port)
        return ActiveSignal(False)

    # ---- audio

    async def get_volume(self, deadline: Optional[float]=None) -> Volume:
        response = await self.transact("getVolumeInformation", deadline=deadline)
        volume = _speaker_entry(response).get("volume")
        if isinstance(volume, bool) or not isinstance(volume, (int, str)):
            raise ProtocolError(f"Unexpected speaker volume: {volume!r}")
        try:
            return Volume(int(volume))
        except ValueError as e:
            raise ProtocolError(f"Unexpected speaker volume: {volume!r}") from e

    async def set_volume(self, volume: int, deadline: Optional[float]=None) -> Volume:
        """Sets the speaker and headphone volume to the same value.

        The two commands are independent; if the second fails, the speaker volume
        has already been changed.

        Raises ValidationError before any request is sent if volume is not an
        integer in [0, 100].
        """
        if isinstance(volume, bool) or not isinstance(volume, int) or volume < 0 or volume > 100:
            raise ValidationError(f"volume must be a value from 0 to 100: {volume!r}")
        self.logger.debug(f"Setting volume for {self.address} to {volume}")
        for target in (SPEAKER_TARGET, HEADPHONE_TARGET):
            await self.transact("setAudioVolume", AudioVolumeParams(target, volume), deadline=deadline)
        return Volume(volume)

    async def get_mute(self, deadline: Optional[float]=None) -> Mute:
        response = await self.transact("getVolumeInformation", deadline=deadline)
        muted = _speaker_entry(response).get("mute")
        if not isinstance(muted, bool):
            raise ProtocolError(f"Unexpected speaker mute status: {muted!r}")
        return Mute(muted)

    async def set_mute(self, muted: bool, deadline: Optional[float]=None) -> Mute:
        """Mutes or unmutes the display, re-sending the command until the display
        reports the requested mute status.

        Raises ConfirmationExhaustedError after config.mute_retries + 1 attempts.
        """
        self.logger.debug(f"Setting mute of {self.address} to {muted}")
        params = AudioMuteParams(muted)
        return await retry_until_confirmed(
            lambda: self.transact("setAudioMute", params, deadline=deadline),
            lambda: self.get_mute(deadline=deadline),
            Mute(muted),
            retries=self.config.mute_retries,
            retry_delay=self.config.mute_retry_delay,
            description=f"mute status of {self.address}",
            deadline=deadline,
            logger=self.logger,
          )

    # ---- picture blanking

    async def blank_display(self, deadline: Optional[float]=None) -> Blanked:
        await self.transact("setPowerSavingMode", PowerSavingModeParams(PICTURE_OFF_MODE), deadline=deadline)
        return Blanked(True)

    async def unblank_display(self, deadline: Optional[float]=None) -> Blanked:
        await self.transact("setPowerSavingMode", PowerSavingModeParams(PICTURE_ON_MODE), deadline=deadline)
        return Blanked(False)

    async def get_blanked(self, deadline: Optional[float]=None) -> Blanked:
        response = await self.transact("getPowerSavingMode", deadline=deadline)
        record = response.first_result()
        mode = record.get("mode") if isinstance(record, dict) else None
        return Blanked(mode == PICTURE_OFF_MODE)

    # ---- hardware identity

    async def get_hardware_info(self, deadline: Optional[float]=None) -> HardwareInfo:
        """Returns the hostname, model, serial number, firmware generation, network
        settings and power status of the display.

        A failed reverse lookup of the hostname is not an error; the address is
        used instead. Any failed request to the display fails the whole operation.
        """
        result = HardwareInfo(hostname=await resolve_display_hostname(self.address))

        try:
            system = _record(await self.transact("getSystemInformation", deadline=deadline))
        except Exception:
            self.logger.error(f"Could not get system info from {self.address}")
            raise
        result.model_name = str(system.get("model", ""))
        result.serial_number = str(system.get("serial", ""))
        result.firmware_version = str(system.get("generation", ""))

        try:
            response = await self.transact(
                "getNetworkSettings",
                NetworkSettingsParams(self.config.network_interface),
                deadline=deadline,
              )
        except Exception:
            self.logger.error(f"Could not get network info from {self.address}")
            raise
        interfaces = _record_list(response)
        if len(interfaces) == 0:
            raise ProtocolError(f"No network settings reported for {self.config.network_interface}")
        network = interfaces[0]
        dns = network.get("dns", [])
        if isinstance(dns, str):
            dns = [dns]
        result.network_info = NetworkInfo(
            ip_address=str(network.get("ipAddrV4", "")),
            mac_address=str(network.get("hwAddr", "")),
            gateway=str(network.get("gateway", "")),
            dns=[str(x) for x in dns],
          )

        self.logger.info(
            f"Hardware Info for {result.hostname}, Model: {result.model_name}, "
            f"Serial: {result.serial_number}, Firmware: {result.firmware_version}, "
            f"IP: {result.network_info.ip_address}, MAC: {result.network_info.mac_address}, "
            f"Gateway: {result.network_info.gateway}, DNS: {result.network_info.dns}"
          )

        try:
            power = await self.get_power(deadline=deadline)
        except Exception:
            self.logger.error(f"Could not get power status from {self.address}")
            raise
        result.power_status = power.power
        return result

    def __str__(self) -> str:
        return f"SonyDisplayClient(address={self.address}, transport={self.transport})"

    def __repr__(self) -> str:
        return str(self)
