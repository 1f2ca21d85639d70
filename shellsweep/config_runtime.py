"""Runtime configuration for shellsweep - centralized configuration management."""

import json
import os
from pathlib import Path
from typing import Any

from shellsweep.utils.logging import logger

DEFAULTS = {
    "scan": {
        # fnmatch globs against the "./"-prefixed POSIX path, like find -path
        "excludes": [
            "*/.git/*",
            "*/vim/submodules/*",
            "*/bash/bash_exports",
        ],
        "shebang": "#!/usr/bin/env bash",
    },
    "lint": {
        "tool": "shellcheck",
        "severity": "warning",
    },
    "spinner": {
        "delay": 0.1,
        "width": 55,
        "frames": "|/-\\",
    },
}

CONFIG_FILE = Path(".shellsweep") / "config.json"

SEVERITIES = ("error", "warning", "info", "style")

# Range checks run after the type check; a value that fails keeps the one in effect
VALIDATORS = {
    ("scan", "shebang"): lambda v: bool(v),
    ("lint", "tool"): lambda v: bool(v.strip()),
    ("lint", "severity"): lambda v: v in SEVERITIES,
    ("spinner", "delay"): lambda v: 0 < v < float("inf"),
    ("spinner", "width"): lambda v: v > 0,
    ("spinner", "frames"): lambda v: bool(v),
}


def load_runtime_config(root: str = ".") -> dict[str, Any]:
    """
    Load runtime configuration from .shellsweep/config.json and environment variables.

    Config priority (highest to lowest):
    1. Environment variables (SHELLSWEEP_<SECTION>_<KEY>)
    2. .shellsweep/config.json file under root
    3. Built-in defaults

    Values of the wrong type or outside their range are logged and ignored.

    Args:
        root: Root directory to look for config file

    Returns:
        Configuration dictionary with merged values
    """

    import copy

    cfg = copy.deepcopy(DEFAULTS)

    path = Path(root) / CONFIG_FILE
    try:
        if path.exists():
            with open(path, encoding="utf-8") as f:
                user = json.load(f)

            if isinstance(user, dict):
                for section in cfg:
                    if section in user and isinstance(user[section], dict):
                        for key, value in user[section].items():
                            if key not in cfg[section]:
                                continue
                            current = cfg[section][key]
                            if _same_kind(value, current) and _in_range(section, key, value):
                                cfg[section][key] = value
                            else:
                                logger.warning(
                                    f"Invalid value for {section}.{key} in {path}: {value!r}"
                                )
                                logger.info(f"Using default value: {cfg[section][key]}")
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load config file from {path}: {e}")
        logger.info("Continuing with default configuration")

    for section in cfg:
        for key in cfg[section]:
            env_var = f"SHELLSWEEP_{section.upper()}_{key.upper()}"
            if env_var in os.environ:
                value = os.environ[env_var]
                try:
                    default_value = cfg[section][key]
                    if isinstance(default_value, int):
                        parsed = int(value)
                    elif isinstance(default_value, float):
                        parsed = float(value)
                    elif isinstance(default_value, list):
                        parsed = [v.strip() for v in value.split(",") if v.strip()]
                    else:
                        parsed = value
                    if not _in_range(section, key, parsed):
                        raise ValueError("out of range")
                    cfg[section][key] = parsed
                except (ValueError, AttributeError) as e:
                    logger.warning(
                        f"Invalid value for environment variable {env_var}: '{value}' - {e}"
                    )
                    logger.info(f"Using default value: {cfg[section][key]}")

    return cfg


def _in_range(section: str, key: str, value: Any) -> bool:
    check = VALIDATORS.get((section, key))
    return check is None or check(value)


def _same_kind(value: Any, default: Any) -> bool:
    """Accept a config value only if it matches the default's type.

    Ints are accepted where a float is expected (delay: 1).
    """
    if isinstance(default, float) and isinstance(value, int) and not isinstance(value, bool):
        return True
    if isinstance(default, list):
        return isinstance(value, list) and all(isinstance(v, str) for v in value)
    return isinstance(value, type(default)) and not isinstance(value, bool)
