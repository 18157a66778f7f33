# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""Package sony_display_control provides an API and a REST server for controlling
Sony displays via their JSON-RPC over HTTP control protocol.
"""

from .version import __version__

from .pkg_logging import logger

from .internal_types import Jsonable, JsonableDict

from .exceptions import (
    SonyDisplayError,
    TransportError,
    DeadlineExceededError,
    ProtocolError,
    ParseError,
    ValidationError,
    ConfirmationTimeoutError,
    ConfirmationExhaustedError,
  )

from .constants import (
    DEFAULT_TIMEOUT,
    DEFAULT_REQUEST_TIMEOUT,
    POWER_TIMEOUT,
    POWER_POLL_INTERVAL,
    MUTE_RETRIES,
    MUTE_RETRY_DELAY,
  )

from .status import (
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

from .client import (
    SonyDisplayClient,
    SonyDisplayClientConfig,
    SonyDisplayClientTransport,
    HttpSonyDisplayClientTransport,
    resolve_display_hostname,
    parse_power_status,
  )

from .protocol import (
    EndpointCategory,
    MethodMeta,
    SonyRequest,
    SonyResponse,
    get_all_methods,
    name_to_method_meta,
  )
