#!/usr/bin/env python3

"""
Sony display known control methods and metadata.

This module contains the JSON-RPC methods used to control the display, together with
the protocol version and endpoint category each one must be sent with. The method
versions are fixed; the display rejects a request whose version does not match.

There is no protocol implementation here; only metadata about the protocol.
"""
from __future__ import annotations

from enum import Enum

from ..internal_types import *

class EndpointCategory(str, Enum):
    """API grouping that selects the request path: http://<address>/sony/<category>"""
    SYSTEM = "system"
    AV_CONTENT = "avContent"
    AUDIO = "audio"

    def __str__(self) -> str:
        return self.value

class MethodMeta:
    """Metadata for a single vendor control method"""
    name: str
    """Vendor method name, e.g. "getPowerStatus"."""

    version: str
    """Protocol version string sent with every request for this method."""

    category: EndpointCategory
    """Endpoint category the request is posted to."""

    request_id: int
    """Fixed id placed in the request envelope. Not used for correlation."""

    has_result: bool
    """True iff a successful response carries at least one result entry. Set methods
       answer with an empty result list."""

    def __init__(
            self,
            name: str,
            version: str,
            category: EndpointCategory,
            request_id: int=1,
            has_result: bool=True,
          ):
        self.name = name
        self.version = version
        self.category = category
        self.request_id = request_id
        self.has_result = has_result

    def __str__(self) -> str:
        return f"MethodMeta({self.category}/{self.name} v{self.version})"

    def __repr__(self) -> str:
        return str(self)

_M = MethodMeta

_method_metas: List[MethodMeta] = [
    # power
    _M("getPowerStatus", "1.0", EndpointCategory.SYSTEM),
    _M("setPowerStatus", "1.0", EndpointCategory.SYSTEM, has_result=False),

    # inputs
    _M("getPlayingContentInfo", "1.0", EndpointCategory.AV_CONTENT),
    _M("setPlayContent", "1.0", EndpointCategory.AV_CONTENT, has_result=False),
    _M("getCurrentExternalInputsStatus", "1.1", EndpointCategory.AV_CONTENT),

    # audio
    _M("getVolumeInformation", "1.0", EndpointCategory.AUDIO),
    _M("setAudioVolume", "1.0", EndpointCategory.AUDIO, has_result=False),
    _M("setAudioMute", "1.0", EndpointCategory.AUDIO, has_result=False),

    # picture blanking
    _M("getPowerSavingMode", "1.0", EndpointCategory.SYSTEM),
    _M("setPowerSavingMode", "1.0", EndpointCategory.SYSTEM, has_result=False),

    # hardware identity
    _M("getSystemInformation", "1.0", EndpointCategory.SYSTEM),
    _M("getNetworkSettings", "1.0", EndpointCategory.SYSTEM, request_id=2),
  ]

method_metas: Dict[str, MethodMeta] = {}
for _method in _method_metas:
    assert not _method.name in method_metas
    method_metas[_method.name] = _method

def get_all_methods() -> List[MethodMeta]:
    """Returns a list of all known methods"""
    return list(_method_metas)

def name_to_method_meta(name: str) -> MethodMeta:
    """Returns the method metadata for the given vendor method name.

    Raises KeyError if the method is not known.
    """
    return method_metas[name]
