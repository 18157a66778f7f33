"""Shared pytest fixtures: an in-memory Sony display served through httpx.MockTransport."""

import json
from typing import Any, AsyncIterator, Callable, Dict, List, Optional, Tuple

import httpx
import pytest
import pytest_asyncio

from sony_display_control import (
    HttpSonyDisplayClientTransport,
    SonyDisplayClient,
    SonyDisplayClientConfig,
)

DISPLAY_ADDRESS = "10.1.2.3"


class FakeDisplay:
    """Minimal stateful emulation of the display's control API.

    Every request is recorded in `requests` as (path, body). Methods can be
    replaced per test through `overrides`, keyed by vendor method name.
    """

    def __init__(self) -> None:
        self.power = "active"
        self.power_delay_polls = 0
        self.mute = False
        self.ignore_mute_commands = 0
        self.speaker_volume = 25
        self.headphone_volume = 10
        self.power_saving_mode = "off"
        self.uri = "extInput:hdmi?port=2"
        self.input_uris = [
            "extInput:hdmi?port=1",
            "extInput:hdmi?port=2",
            "extInput:hdmi?port=3",
            "extInput:component?port=1",
        ]
        self.requests: List[Tuple[str, Dict[str, Any]]] = []
        self.headers: List[httpx.Headers] = []
        self.overrides: Dict[str, Callable[[Dict[str, Any]], httpx.Response]] = {}
        self._power_target: Optional[str] = None
        self._power_countdown = 0

    def methods(self) -> List[str]:
        return [body["method"] for _, body in self.requests]

    def count(self, method: str) -> int:
        return self.methods().count(method)

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append((request.url.path, body))
        self.headers.append(request.headers)
        method = body["method"]
        if method in self.overrides:
            return self.overrides[method](body)
        params = body["params"][0] if body["params"] else {}
        result = getattr(self, f"_{method}")(params)
        return httpx.Response(200, json={"id": body["id"], "result": result})

    # ---- power

    def _getPowerStatus(self, params: Dict[str, Any]) -> List[Any]:
        if self._power_target is not None:
            if self._power_countdown <= 0:
                self.power = self._power_target
                self._power_target = None
            else:
                self._power_countdown -= 1
        return [{"status": self.power}]

    def _setPowerStatus(self, params: Dict[str, Any]) -> List[Any]:
        self._power_target = "active" if params["status"] else "standby"
        self._power_countdown = self.power_delay_polls
        return []

    # ---- inputs

    def _getPlayingContentInfo(self, params: Dict[str, Any]) -> List[Any]:
        return [{"uri": self.uri, "source": "extInput:hdmi", "title": "HDMI 2"}]

    def _setPlayContent(self, params: Dict[str, Any]) -> List[Any]:
        self.uri = params["uri"]
        return []

    def _getCurrentExternalInputsStatus(self, params: Dict[str, Any]) -> List[Any]:
        return [[
            {
                "uri": uri,
                "title": uri,
                "connection": True,
                "label": "",
                "icon": "meta:hdmi",
                "status": "true" if uri == self.uri else "false",
            }
            for uri in self.input_uris
        ]]

    # ---- audio

    def _getVolumeInformation(self, params: Dict[str, Any]) -> List[Any]:
        return [[
            {"target": "speaker", "volume": self.speaker_volume, "mute": self.mute,
             "maxVolume": 100, "minVolume": 0},
            {"target": "headphone", "volume": self.headphone_volume, "mute": not self.mute,
             "maxVolume": 100, "minVolume": 0},
        ]]

    def _setAudioVolume(self, params: Dict[str, Any]) -> List[Any]:
        if params["target"] == "speaker":
            self.speaker_volume = int(params["volume"])
        else:
            self.headphone_volume = int(params["volume"])
        return []

    def _setAudioMute(self, params: Dict[str, Any]) -> List[Any]:
        if self.ignore_mute_commands > 0:
            self.ignore_mute_commands -= 1
        else:
            self.mute = params["status"]
        return []

    # ---- picture blanking

    def _getPowerSavingMode(self, params: Dict[str, Any]) -> List[Any]:
        return [{"mode": self.power_saving_mode}]

    def _setPowerSavingMode(self, params: Dict[str, Any]) -> List[Any]:
        self.power_saving_mode = params["mode"]
        return []

    # ---- hardware identity

    def _getSystemInformation(self, params: Dict[str, Any]) -> List[Any]:
        return [{
            "product": "TV",
            "region": "USA",
            "language": "eng",
            "model": "FW-65BZ35F",
            "serial": "7001234",
            "macAddr": "fc:f1:52:aa:bb:cc",
            "name": "BRAVIA",
            "generation": "5.2.0",
        }]

    def _getNetworkSettings(self, params: Dict[str, Any]) -> List[Any]:
        return [[{
            "netif": params["netif"],
            "hwAddr": "fc:f1:52:aa:bb:cc",
            "ipAddrV4": DISPLAY_ADDRESS,
            "ipAddrV6": "",
            "netmask": "255.255.255.0",
            "gateway": "10.1.2.1",
            "dns": ["10.1.1.1", "10.1.1.2"],
        }]]


def fast_config(**kwargs: Any) -> SonyDisplayClientConfig:
    """Config with short intervals so confirmation loops finish quickly in tests."""
    defaults: Dict[str, Any] = dict(
        psk="secret",
        power_timeout_secs=1.0,
        power_poll_interval=0.005,
        mute_retry_delay=0.001,
    )
    defaults.update(kwargs)
    return SonyDisplayClientConfig(**defaults)


def make_transport(display: FakeDisplay, psk: str = "secret") -> HttpSonyDisplayClientTransport:
    return HttpSonyDisplayClientTransport(
        psk=psk,
        client=httpx.AsyncClient(transport=httpx.MockTransport(display.handler)),
    )


@pytest.fixture
def display() -> FakeDisplay:
    return FakeDisplay()


@pytest_asyncio.fixture
async def client(display: FakeDisplay) -> AsyncIterator[SonyDisplayClient]:
    transport = make_transport(display)
    yield SonyDisplayClient(DISPLAY_ADDRESS, transport, config=fast_config())
    await transport.aclose()
