# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
A REST FastAPI server that controls Sony displays.
"""
from .app import display_api
from .api import router, get_display_transport, get_display_config, status_code_for_error
