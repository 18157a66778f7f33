# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Capability state values returned by SonyDisplayClient.

Each value is created fresh for a single request and serializes to the JSON
shape returned by the REST server.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .internal_types import *

POWER_ON = "on"
POWER_STANDBY = "standby"

class StatusValue(ABC):
    """Base class for capability state values."""

    @abstractmethod
    def to_jsonable(self) -> JsonableDict:
        ...

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        assert isinstance(other, StatusValue)
        return self.to_jsonable() == other.to_jsonable()

    def __str__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.to_jsonable().items())
        return f"{self.__class__.__name__}({fields})"

    def __repr__(self) -> str:
        return str(self)

class Power(StatusValue):
    power: str
    """Either "on" or "standby"."""

    def __init__(self, power: str):
        self.power = power

    @property
    def is_on(self) -> bool:
        return self.power == POWER_ON

    def to_jsonable(self) -> JsonableDict:
        return {"power": self.power}

class Input(StatusValue):
    input: str
    """Input identifier of the form "<type>!<port>", e.g. "hdmi!2". Empty if unknown."""

    def __init__(self, input: str=""):
        self.input = input

    def to_jsonable(self) -> JsonableDict:
        return {"input": self.input}

class InputList(StatusValue):
    inputs: List[str]

    def __init__(self, inputs: Optional[List[str]]=None):
        self.inputs = [] if inputs is None else list(inputs)

    def to_jsonable(self) -> JsonableDict:
        return {"inputs": list(self.inputs)}

class ActiveSignal(StatusValue):
    active: bool

    def __init__(self, active: bool=False):
        self.active = active

    def to_jsonable(self) -> JsonableDict:
        return {"active": self.active}

class Volume(StatusValue):
    volume: int

    def __init__(self, volume: int):
        self.volume = volume

    def to_jsonable(self) -> JsonableDict:
        return {"volume": self.volume}

class Mute(StatusValue):
    muted: bool

    def __init__(self, muted: bool):
        self.muted = muted

    def to_jsonable(self) -> JsonableDict:
        return {"muted": self.muted}

class Blanked(StatusValue):
    blanked: bool

    def __init__(self, blanked: bool):
        self.blanked = blanked

    def to_jsonable(self) -> JsonableDict:
        return {"blanked": self.blanked}

class NetworkInfo(StatusValue):
    ip_address: str
    mac_address: str
    gateway: str
    dns: List[str]

    def __init__(
            self,
            ip_address: str="",
            mac_address: str="",
            gateway: str="",
            dns: Optional[List[str]]=None,
          ):
        self.ip_address = ip_address
        self.mac_address = mac_address
        self.gateway = gateway
        self.dns = [] if dns is None else list(dns)

    def to_jsonable(self) -> JsonableDict:
        return {
            "ip_address": self.ip_address,
            "mac_address": self.mac_address,
            "gateway": self.gateway,
            "dns": list(self.dns),
          }

class HardwareInfo(StatusValue):
    hostname: str
    model_name: str
    serial_number: str
    firmware_version: str
    network_info: NetworkInfo
    power_status: str

    def __init__(
            self,
            hostname: str="",
            model_name: str="",
            serial_number: str="",
            firmware_version: str="",
            network_info: Optional[NetworkInfo]=None,
            power_status: str="",
          ):
        self.hostname = hostname
        self.model_name = model_name
        self.serial_number = serial_number
        self.firmware_version = firmware_version
        self.network_info = NetworkInfo() if network_info is None else network_info
        self.power_status = power_status

    def to_jsonable(self) -> JsonableDict:
        return {
            "hostname": self.hostname,
            "model_name": self.model_name,
            "serial_number": self.serial_number,
            "firmware_version": self.firmware_version,
            "network_information": self.network_info.to_jsonable(),
            "power_status": self.power_status,
          }
