""".env loading with CLI override merging."""

from __future__ import annotations

import os
from typing import Any

from dotenv import load_dotenv

DEFAULTS: dict[str, Any] = {
    "type": "auto",
    "fps": 0.0,
    "original_fps": 0.0,
    "delay": 0,  # tenths of a second
    "sort": False,
    "verbose": False,
}

DEFAULT_MICROSEC_PER_FRAME = 40000


def _parse_bool(val: str) -> bool:
    return val.strip().lower() in {"1", "true", "yes", "on"}


def build_config(
    cli_args: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Merge defaults <- env vars <- CLI args."""
    load_dotenv()
    config = dict(DEFAULTS)

    # Layer 2: env vars (SUBDEMUX_ prefix)
    env_map = {
        "SUBDEMUX_TYPE": "type",
        "SUBDEMUX_FPS": "fps",
        "SUBDEMUX_ORIGINAL_FPS": "original_fps",
        "SUBDEMUX_DELAY": "delay",
        "SUBDEMUX_SORT": "sort",
    }
    for env_key, cfg_key in env_map.items():
        val = os.environ.get(env_key)
        if val is not None:
            if cfg_key in ("fps", "original_fps"):
                config[cfg_key] = float(val)
            elif cfg_key == "delay":
                config[cfg_key] = int(val)
            elif cfg_key == "sort":
                config[cfg_key] = _parse_bool(val)
            else:
                config[cfg_key] = val

    # Layer 3: CLI args (override everything)
    if cli_args:
        for key, val in cli_args.items():
            if val is not None:
                config[key] = val

    return config


def frame_duration(config: dict[str, Any]) -> int:
    """Microseconds per frame for frame-based formats.

    The movie frame rate is used when known; an explicit ``fps`` override
    takes precedence over it.
    """
    microsec_per_frame = DEFAULT_MICROSEC_PER_FRAME
    original_fps = float(config.get("original_fps") or 0.0)
    if original_fps >= 1.0:
        microsec_per_frame = round(1_000_000 / original_fps)
    fps = float(config.get("fps") or 0.0)
    if fps >= 1.0:
        microsec_per_frame = round(1_000_000 / fps)
    return microsec_per_frame


def delay_microseconds(config: dict[str, Any]) -> int:
    """Convert the configured delay (1/10 s) to microseconds."""
    return int(config.get("delay") or 0) * 100_000
