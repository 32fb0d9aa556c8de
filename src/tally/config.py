"""Configuration loading for tally.

Settings are merged from, in increasing priority:

1. built-in defaults,
2. the ``[tool.tally]`` table of the nearest ``pyproject.toml``,
3. a ``.env`` file in the project root,
4. ``TALLY_*`` environment variables.

Command-line flags are applied on top by the CLI.
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tally.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "TALLY_"


class TallyConfig(BaseModel):
    """Resolved tally settings.

    Parameters
    ----------
    reporter:
        Registry name or import string of the reporter used for trace output.
    summary:
        Whether ``tally run`` prints a summary line after the script finishes.
    verbosity:
        Passed to reporters that support it; negative hides passed checks.
    addopts:
        Extra arguments prepended to the command line.
    """

    model_config = ConfigDict(extra="forbid")

    reporter: str = "TraceReporter"
    summary: bool = True
    verbosity: int = 0
    addopts: list[str] = Field(default_factory=list)


DEFAULT_CONFIG = TallyConfig()


def find_project_root(start: Path | None = None) -> Path:
    """Walk up from ``start`` to the first directory holding ``pyproject.toml``."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        if (directory / "pyproject.toml").is_file():
            return directory
    return current


def _read_pyproject(root: Path) -> dict[str, Any]:
    path = root / "pyproject.toml"
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc
    tool = data.get("tool", {})
    if not isinstance(tool, dict):
        msg = f"[tool] in {path} must be a table"
        raise ConfigError(msg)
    section = tool.get("tally", {})
    if not isinstance(section, dict):
        msg = f"[tool.tally] in {path} must be a table"
        raise ConfigError(msg)
    return section


def _read_env(environ: Mapping[str, str | None]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for name in TallyConfig.model_fields:
        if name == "addopts":
            continue
        raw = environ.get(ENV_PREFIX + name.upper())
        if raw is not None and raw != "":
            values[name] = raw
    addopts = environ.get(ENV_PREFIX + "ADDOPTS")
    if addopts:
        values["addopts"] = addopts.split()
    return values


def load_config(
    start: Path | None = None,
    environ: Mapping[str, str | None] | None = None,
) -> TallyConfig:
    """Load configuration for the project containing ``start``.

    Raises:
        ConfigError: If any source holds an unknown key or an invalid value.
    """
    root = find_project_root(start)
    settings: dict[str, Any] = dict(_read_pyproject(root))

    env: dict[str, str | None] = dict(dotenv_values(root / ".env"))
    env.update(os.environ if environ is None else environ)
    settings.update(_read_env(env))

    try:
        config = TallyConfig.model_validate(settings)
    except ValidationError as exc:
        msg = f"Invalid tally configuration: {exc}"
        raise ConfigError(msg) from exc

    logger.debug("Loaded config from %s: %s", root, config)
    return config


__all__ = ["DEFAULT_CONFIG", "TallyConfig", "find_project_root", "load_config"]
