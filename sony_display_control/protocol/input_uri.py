# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Conversion between input identifiers ("hdmi!2") and the external input URIs
used by the display ("extInput:hdmi?port=2").
"""

from __future__ import annotations

import re

from ..internal_types import *
from ..exceptions import ValidationError, ParseError

INPUT_URI_RE = re.compile(r'extInput:(.*?)\?port=(.*)')
"""Matches an external input URI. Group 1 is the input type, group 2 the port."""

INPUT_ID_SEPARATOR = "!"

def split_input_id(input_id: str) -> Tuple[str, str]:
    """Splits an input identifier of the form "<type>!<port>" into (type, port).

    Raises ValidationError if the identifier is not of that form.
    """
    parts = input_id.split(INPUT_ID_SEPARATOR)
    if len(parts) != 2 or parts[0] == '' or parts[1] == '':
        raise ValidationError(
            f"ports configured incorrectly (should follow format \"hdmi!2\"): {input_id}")
    return parts[0], parts[1]

def input_id_to_uri(input_id: str) -> str:
    """Returns the external input URI for an input identifier, e.g. "hdmi!2" -> "extInput:hdmi?port=2"."""
    input_type, port = split_input_id(input_id)
    return f"extInput:{input_type}?port={port}"

def uri_to_input_id(uri: str) -> str:
    """Returns the input identifier for an external input URI, e.g. "extInput:hdmi?port=2" -> "hdmi!2".

    Raises ParseError if the URI is not an external input URI.
    """
    match = INPUT_URI_RE.search(uri)
    if match is None:
        raise ParseError(f"Unrecognized input URI: {uri!r}")
    return f"{match.group(1)}{INPUT_ID_SEPARATOR}{match.group(2)}"
