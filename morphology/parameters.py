"""Analysis parameters read from YAML configuration files.

Parameters are layered.  The defaults shipped in defaults.yaml come
first, then ~/.morpho-align.yaml, then any files named by the caller,
where files earlier in the list take precedence over later ones.
"""

import logging
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

# ── Configuration files ─────────────────────────────────────────────────────

_DEFAULTS_PATH = Path(__file__).with_name("defaults.yaml")
_USER_CONFIG_PATH = Path("~/.morpho-align.yaml")


def _load_config(path):
    """Read a YAML mapping of parameters, with keys as strings."""
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path} does not contain a mapping of parameters")
    return {str(k): v for k, v in raw.items()}


def load_parameters(filenames=(), user_config=_USER_CONFIG_PATH):
    """Merge the default, user and *filenames* configurations.

    Files that do not exist are skipped, except for *filenames*, which
    must all exist.
    """
    params = _load_config(_DEFAULTS_PATH)
    user_config = Path(user_config).expanduser()
    if user_config.is_file():
        params.update(_load_config(user_config))
    for filename in reversed(list(filenames)):
        params.update(_load_config(Path(filename).expanduser()))
    logger.debug("Parameters\n%s", format_parameters(params))
    return params


def format_parameters(params):
    """A table of parameters and values sorted by parameter."""
    if not params:
        return ""
    width = max(len(p) for p in params)
    return "\n".join(f"{p:{width}} {params[p]}" for p in sorted(params))
