# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Low-level protocol definitions for Sony displays.

The display is controlled with JSON-RPC style envelopes posted over HTTP to
http://<address>/sony/<category>.
"""

from .method_meta import (
    EndpointCategory,
    MethodMeta,
    get_all_methods,
    name_to_method_meta,
  )

from .params import (
    MethodParams,
    PowerStatusParams,
    PlayContentParams,
    AudioVolumeParams,
    AudioMuteParams,
    PowerSavingModeParams,
    NetworkSettingsParams,
  )

from .input_uri import (
    INPUT_URI_RE,
    split_input_id,
    input_id_to_uri,
    uri_to_input_id,
  )

from .request import SonyRequest

from .response import SonyResponse
