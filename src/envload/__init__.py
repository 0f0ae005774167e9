# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Envload -- strict .env parsing with interpolation and explicit clobber policies."""

from envload.errors import ParseError
from envload.options import LoadOptions
from envload.policy import ClobberPolicy
from envload.resolve import parse
from envload.sdk import (
    dotenv_values,
    find_env_file,
    get_bool,
    get_float,
    get_int,
    get_str,
    load,
    load_contents,
    load_dotenv,
    load_multi,
    load_stream,
)

__all__ = [
    "__version__",
    "ClobberPolicy",
    "LoadOptions",
    "ParseError",
    "dotenv_values",
    "find_env_file",
    "get_bool",
    "get_float",
    "get_int",
    "get_str",
    "load",
    "load_contents",
    "load_dotenv",
    "load_multi",
    "load_stream",
    "parse",
]
__version__ = "0.1.0"
