# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""SDK for loading .env files into the environment (python-dotenv style)."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import IO

from envload.errors import ParseError
from envload.options import LoadOptions
from envload.policy import ClobberPolicy, apply, collapse
from envload.resolve import parse
from envload.util import parse_bool, to_env_dict

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILENAME = ".env"


def find_env_file(path: str | Path | None = None, traverse: bool = False) -> Path | None:
    """Locate the .env file for *path*.

    A directory (or ``None``) means ``.env`` inside it (default: cwd).  With
    *traverse*, parent directories are searched for the same file name until
    one exists or the filesystem root is reached.
    """
    raw = str(path) if path is not None else ""
    candidate = Path(raw) if raw else Path.cwd()
    if not raw or raw.endswith(("/", os.sep)) or candidate.is_dir():
        candidate = candidate / DEFAULT_ENV_FILENAME
    if not traverse:
        return candidate if candidate.is_file() else None

    name = candidate.name
    cur = candidate.parent.resolve()
    while True:
        found = cur / name
        if found.is_file():
            return found
        if cur.parent == cur:
            return None
        cur = cur.parent


def _load_text(
    text: str,
    options: LoadOptions,
    previous: Sequence[tuple[str, str]] = (),
    source: str | None = None,
) -> dict[str, str]:
    target = options.resolve_target()
    existing = target.snapshot()
    dict_option = options.clobber.dict_option

    seed = list(existing.items()) if options.include_env_vars else []
    context = to_env_dict([*seed, *previous], dict_option)
    try:
        pairs = parse(text, context, options.clobber)
    except ParseError as e:
        if source is None:
            raise
        raise e.with_source(source) from None

    already_set = to_env_dict([*existing.items(), *previous], dict_option)
    result = collapse(pairs, options.clobber, already_set)
    if options.set_env_vars:
        apply(result, target)
    return result.values


def _load_path(
    path: str | Path | None,
    options: LoadOptions,
    previous: Sequence[tuple[str, str]] = (),
) -> dict[str, str]:
    found = find_env_file(path, traverse=not options.only_exact_path)
    # Not having a .env file (e.g. in production) is normal, not an error.
    if found is None:
        logger.debug("No .env file found for %s", path or DEFAULT_ENV_FILENAME)
        return {}
    values = _load_text(found.read_text(encoding="utf-8"), options, previous, source=str(found))
    logger.debug("Loaded %d variable(s) from %s", len(values), found)
    return values


def load(path: str | Path | None = None, options: LoadOptions | None = None) -> dict[str, str]:
    """Load one .env file and return its variables in file order.

    A missing file returns ``{}``.  Raises :class:`ParseError` on bad syntax,
    in which case nothing is written to the target.
    """
    return _load_path(path, options or LoadOptions())


def load_multi(paths: Iterable[str | Path], options: LoadOptions | None = None) -> dict[str, str]:
    """Load several files in order.

    Variables from earlier files are visible to ``$NAME`` in later files and
    count as already set for the no-clobber policies.
    """
    options = options or LoadOptions()
    loaded: list[tuple[str, str]] = []
    for path in paths:
        loaded.extend(_load_path(path, options, loaded).items())
    return to_env_dict(loaded, options.clobber.dict_option)


def load_contents(text: str, options: LoadOptions | None = None) -> dict[str, str]:
    """Load variables from an in-memory string."""
    return _load_text(text, options or LoadOptions())


def load_stream(stream: IO[str] | IO[bytes], options: LoadOptions | None = None) -> dict[str, str]:
    """Load variables from an open text or binary (UTF-8) stream."""
    data = stream.read()
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    return _load_text(data, options or LoadOptions())


def load_dotenv(
    path: str | Path | None = DEFAULT_ENV_FILENAME,
    override: bool = True,
    traverse: bool = False,
    interpolate_env: bool = True,
) -> bool:
    """Load a .env file into os.environ (python-dotenv compatible API).

    Parameters
    ----------
    path : str or Path, default ".env"
        File (or directory holding ``.env``) to load.
    override : bool, default True
        If True, overwrite existing keys in os.environ. If False, only set
        keys that are not already set.
    traverse : bool, default False
        Search parent directories when the file is not found at *path*.
    interpolate_env : bool, default True
        Let ``$NAME`` fall back to variables already in os.environ.

    Returns
    -------
    bool
        True if at least one variable was loaded, False otherwise.

    Examples
    --------
    >>> from envload import load_dotenv
    >>> load_dotenv()  # ./.env, overriding existing variables
    True
    >>> load_dotenv(".env.local", override=False)
    True
    """
    options = LoadOptions(
        clobber=ClobberPolicy.CLOBBER if override else ClobberPolicy.NO_CLOBBER,
        only_exact_path=not traverse,
        include_env_vars=interpolate_env,
    )
    return bool(load(path, options))


def dotenv_values(
    path: str | Path | None = DEFAULT_ENV_FILENAME,
    traverse: bool = False,
    interpolate_env: bool = True,
    clobber: ClobberPolicy = ClobberPolicy.CLOBBER,
) -> dict[str, str]:
    """Return a .env file's variables as a dict without modifying os.environ.

    Same resolution as :func:`load_dotenv`; ``$NAME`` may still read
    os.environ unless *interpolate_env* is False.
    """
    options = LoadOptions(
        set_env_vars=False,
        clobber=clobber,
        only_exact_path=not traverse,
        include_env_vars=interpolate_env,
    )
    return load(path, options)


def get_str(key: str, fallback: str | None = None) -> str | None:
    return os.environ.get(key, fallback)


def get_bool(key: str, fallback: bool = False) -> bool:
    """``true``/``false`` (any case) from os.environ, else *fallback*."""
    value = parse_bool(os.environ.get(key))
    return fallback if value is None else value


def get_int(key: str, fallback: int = 0) -> int:
    try:
        return int(os.environ[key])
    except (KeyError, ValueError):
        return fallback


def get_float(key: str, fallback: float = 0.0) -> float:
    try:
        return float(os.environ[key])
    except (KeyError, ValueError):
        return fallback
