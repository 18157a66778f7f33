# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Parameter builders for vendor methods that take parameters.

Each builder belongs to exactly one method and produces exactly the parameter
object that method expects.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..internal_types import *
from ..constants import SPEAKER_TARGET, HEADPHONE_TARGET, PICTURE_OFF_MODE, PICTURE_ON_MODE
from .input_uri import input_id_to_uri

class MethodParams(ABC):
    """Base class for method parameter builders"""
    method_name: str = ""
    """Name of the vendor method these parameters belong to."""

    @abstractmethod
    def to_jsonable(self) -> JsonableDict:
        ...

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        assert isinstance(other, MethodParams)
        return self.to_jsonable() == other.to_jsonable()

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.to_jsonable()})"

    def __repr__(self) -> str:
        return str(self)

class PowerStatusParams(MethodParams):
    method_name = "setPowerStatus"
    status: bool

    def __init__(self, status: bool):
        self.status = status

    def to_jsonable(self) -> JsonableDict:
        return {"status": self.status}

class PlayContentParams(MethodParams):
    method_name = "setPlayContent"
    uri: str

    def __init__(self, uri: str):
        self.uri = uri

    @classmethod
    def from_input(cls, input_id: str) -> PlayContentParams:
        """Creates parameters that select an external input, e.g. "hdmi!2".

        Raises ValidationError if input_id is malformed.
        """
        return cls(input_id_to_uri(input_id))

    def to_jsonable(self) -> JsonableDict:
        return {"uri": self.uri}

class AudioVolumeParams(MethodParams):
    method_name = "setAudioVolume"
    target: str
    volume: int

    def __init__(self, target: str, volume: int):
        if not target in (SPEAKER_TARGET, HEADPHONE_TARGET):
            raise ValueError(f"Unknown audio target: {target}")
        self.target = target
        self.volume = volume

    def to_jsonable(self) -> JsonableDict:
        # the display expects the volume as a decimal string
        return {"target": self.target, "volume": str(self.volume)}

class AudioMuteParams(MethodParams):
    method_name = "setAudioMute"
    status: bool

    def __init__(self, status: bool):
        self.status = status

    def to_jsonable(self) -> JsonableDict:
        return {"status": self.status}

class PowerSavingModeParams(MethodParams):
    method_name = "setPowerSavingMode"
    mode: str

    def __init__(self, mode: str):
        if not mode in (PICTURE_OFF_MODE, PICTURE_ON_MODE):
            raise ValueError(f"Unsupported power saving mode: {mode}")
        self.mode = mode

    def to_jsonable(self) -> JsonableDict:
        return {"mode": self.mode}

class NetworkSettingsParams(MethodParams):
    method_name = "getNetworkSettings"
    netif: str

    def __init__(self, netif: str):
        self.netif = netif

    def to_jsonable(self) -> JsonableDict:
        return {"netif": self.netif}
