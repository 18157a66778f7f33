"""Tests for the REST routes and their error translation."""

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from conftest import DISPLAY_ADDRESS, FakeDisplay, fast_config, make_transport
from sony_display_control import (
    ConfirmationExhaustedError,
    ConfirmationTimeoutError,
    DeadlineExceededError,
    ParseError,
    ProtocolError,
    TransportError,
    ValidationError,
)
from sony_display_control.rest_server import (
    display_api,
    get_display_config,
    get_display_transport,
    router,
    status_code_for_error,
)


@pytest.fixture
def api(display: FakeDisplay) -> TestClient:
    app = FastAPI()
    app.include_router(router)
    transport = make_transport(display)
    config = fast_config()
    app.dependency_overrides[get_display_transport] = lambda: transport
    app.dependency_overrides[get_display_config] = lambda: config
    return TestClient(app)


class TestStatusCodes:
    """Tests for error -> HTTP status translation."""

    def test_validation_is_400(self):
        assert status_code_for_error(ValidationError("bad")) == 400

    @pytest.mark.parametrize("error", [
        TransportError("down"),
        DeadlineExceededError("late"),
        ProtocolError("error"),
        ParseError("shape"),
        ConfirmationTimeoutError("timeout"),
        ConfirmationExhaustedError("tries", attempts=5),
    ])
    def test_other_errors_are_500(self, error):
        assert status_code_for_error(error) == 500


class TestRoutes:
    """Tests for each route against a fake display."""

    def test_power_on(self, api, display):
        display.power = "standby"

        response = api.get(f"/{DISPLAY_ADDRESS}/power/on")

        assert response.status_code == 200
        assert response.json() == {"power": "on"}

    def test_power_standby(self, api, display):
        response = api.get(f"/{DISPLAY_ADDRESS}/power/standby")

        assert response.status_code == 200
        assert response.json() == {"power": "standby"}

    def test_power_status(self, api, display):
        response = api.get(f"/{DISPLAY_ADDRESS}/power/status")

        assert response.json() == {"power": "on"}

    def test_switch_input(self, api, display):
        response = api.get(f"/{DISPLAY_ADDRESS}/input/hdmi!3")

        assert response.status_code == 200
        assert response.json() == {"input": "hdmi!3"}
        assert display.uri == "extInput:hdmi?port=3"

    def test_switch_input_bad_port(self, api, display):
        response = api.get(f"/{DISPLAY_ADDRESS}/input/badformat")

        assert response.status_code == 400
        assert "hdmi!2" in response.json()
        assert display.requests == []

    def test_input_current_is_not_a_port(self, api, display):
        response = api.get(f"/{DISPLAY_ADDRESS}/input/current")

        assert response.status_code == 200
        assert response.json() == {"input": "hdmi!2"}
        assert "setPlayContent" not in display.methods()

    def test_input_list(self, api, display):
        response = api.get(f"/{DISPLAY_ADDRESS}/input/list")

        assert response.status_code == 200
        assert response.json() == {"inputs": ["hdmi!1", "hdmi!2", "hdmi!3", "component!1"]}

    def test_active_signal(self, api, display):
        response = api.get(f"/{DISPLAY_ADDRESS}/active/hdmi!2")

        assert response.json() == {"active": True}

    def test_set_volume(self, api, display):
        response = api.get(f"/{DISPLAY_ADDRESS}/volume/set/35")

        assert response.status_code == 200
        assert response.json() == {"volume": 35}
        assert display.speaker_volume == 35
        assert display.headphone_volume == 35

    @pytest.mark.parametrize("value", ["101", "-1", "loud", "3.5", "1_0", " 5 ", "\u0665"])
    def test_set_volume_invalid(self, api, display, value):
        response = api.get(f"/{DISPLAY_ADDRESS}/volume/set/{value}")

        assert response.status_code == 400
        assert display.requests == []

    def test_volume_level(self, api, display):
        response = api.get(f"/{DISPLAY_ADDRESS}/volume/level")

        assert response.json() == {"volume": 25}

    def test_mute_and_unmute(self, api, display):
        response = api.get(f"/{DISPLAY_ADDRESS}/volume/mute")
        assert response.json() == {"muted": True}
        assert display.mute is True

        response = api.get(f"/{DISPLAY_ADDRESS}/volume/unmute")
        assert response.json() == {"muted": False}
        assert display.mute is False

    def test_mute_status(self, api, display):
        display.mute = True

        response = api.get(f"/{DISPLAY_ADDRESS}/volume/mute/status")

        assert response.json() == {"muted": True}
        assert "setAudioMute" not in display.methods()

    def test_mute_exhausted_is_500(self, api, display):
        display.ignore_mute_commands = 1000

        response = api.get(f"/{DISPLAY_ADDRESS}/volume/mute")

        assert response.status_code == 500
        assert "5 times" in response.json()

    def test_display_blank_unblank_status(self, api, display):
        assert api.get(f"/{DISPLAY_ADDRESS}/display/blank").json() == {"blanked": True}
        assert api.get(f"/{DISPLAY_ADDRESS}/display/status").json() == {"blanked": True}
        assert api.get(f"/{DISPLAY_ADDRESS}/display/unblank").json() == {"blanked": False}
        assert api.get(f"/{DISPLAY_ADDRESS}/display/status").json() == {"blanked": False}

    def test_hardware(self, api, display, monkeypatch):
        async def fake_resolve(address):
            return "tv1.example.com"

        monkeypatch.setattr(
            "sony_display_control.client.client_impl.resolve_display_hostname", fake_resolve)

        response = api.get(f"/{DISPLAY_ADDRESS}/hardware")

        assert response.status_code == 200
        data = response.json()
        assert data["model_name"] == "FW-65BZ35F"
        assert data["network_information"]["gateway"] == "10.1.2.1"
        assert data["power_status"] == "on"
        assert data["hostname"] == "tv1.example.com"

    def test_invalid_address_is_400(self, api, display):
        response = api.get("/host:notaport/power/status")

        assert response.status_code == 400
        assert display.requests == []

    def test_transport_failure_is_500(self, api, display):
        display.overrides["getPowerStatus"] = lambda body: httpx.Response(502, text="bad gateway")

        response = api.get(f"/{DISPLAY_ADDRESS}/power/status")

        assert response.status_code == 500

    def test_protocol_failure_is_500(self, api, display):
        display.overrides["getVolumeInformation"] = lambda body: httpx.Response(
            200, json={"id": 1, "error": [40005, "Display Is Turned off"]})

        response = api.get(f"/{DISPLAY_ADDRESS}/volume/level")

        assert response.status_code == 500
        assert "Display Is Turned off" in response.json()


class TestApp:
    """Tests for the application object."""

    def test_routes_registered(self):
        paths = {route.path for route in display_api.routes}

        for path in (
            "/{address}/power/on",
            "/{address}/power/standby",
            "/{address}/power/status",
            "/{address}/input/current",
            "/{address}/input/list",
            "/{address}/input/{port}",
            "/{address}/active/{port}",
            "/{address}/volume/set/{value}",
            "/{address}/volume/level",
            "/{address}/volume/mute",
            "/{address}/volume/unmute",
            "/{address}/volume/mute/status",
            "/{address}/display/blank",
            "/{address}/display/unblank",
            "/{address}/display/status",
            "/{address}/hardware",
        ):
            assert path in paths

    def test_lifespan_creates_transport(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("SONY_DISPLAY_CONFIG", raising=False)
        config_file = tmp_path / "sony_display_config.json"
        config_file.write_text('{"psk": "abcd", "mute_retries": 2}')

        with TestClient(display_api):
            assert display_api.state.raw_config == {"psk": "abcd", "mute_retries": 2}
            assert display_api.state.display_config.psk == "abcd"
            assert display_api.state.display_config.mute_retries == 2
            assert display_api.state.display_transport.psk == "abcd"
