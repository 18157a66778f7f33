# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""Constants used by sony_display_control"""

DEFAULT_TIMEOUT = 5.0
"""The default timeout for a single HTTP exchange with the display, in seconds."""

DEFAULT_REQUEST_TIMEOUT = 45.0
"""The default deadline for a complete REST operation, including any confirmation loop, in seconds."""

DEFAULT_PSK = "0000"
"""The default pre-shared key sent to the display in the X-Auth-PSK header."""

PSK_HEADER = "X-Auth-PSK"
"""HTTP header that carries the pre-shared key."""

SONY_API_PATH = "sony"
"""First path segment of every control endpoint: http://<address>/sony/<category>"""

POWER_TIMEOUT = 30.0
"""The timeout for the display to report the requested power state after a power command, in seconds."""

POWER_POLL_INTERVAL = 0.256
"""Seconds between power status polls while waiting for a power state change."""

MUTE_RETRIES = 4
"""Number of times the mute command is re-sent after the first attempt fails to stick."""

MUTE_RETRY_DELAY = 0.01
"""Seconds to wait between mute attempts."""

DEFAULT_NETWORK_INTERFACE = "eth0"
"""Network interface whose settings are reported in hardware info."""

SPEAKER_TARGET = "speaker"
HEADPHONE_TARGET = "headphone"

PICTURE_OFF_MODE = "pictureOff"
"""Power saving mode that blanks the panel."""

PICTURE_ON_MODE = "off"
"""Power saving mode that restores the picture."""
