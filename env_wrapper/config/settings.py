"""Constants and default resolution for the accessor.

The default secrets directory is the conventional container mount point and
can be moved by setting ``ENV_WRAPPER_SECRETS_DIR``. The logger used when
none is injected is chosen by ``ENV_WRAPPER_LOG`` (``noop`` unless set).
"""

from __future__ import annotations

import os

from env_wrapper.services.environment.interface import EnvironmentInterface
from env_wrapper.services.logger.factory import LOGGERS

SECRET_PREFIX = "ENV_"
DEFAULT_SECRETS_DIR = "/run/secrets"
SECRETS_DIR_VAR = "ENV_WRAPPER_SECRETS_DIR"
LOG_IMPL_VAR = "ENV_WRAPPER_LOG"
DEFAULT_LOG_IMPL = "noop"

_SEPARATORS = "/" + os.sep + (os.altsep or "")


def clean_dir(path: str) -> str:
    """Strip surrounding whitespace and trailing path separators."""
    return path.strip().rstrip(_SEPARATORS)


def resolve_secrets_dir(path: str, environment: EnvironmentInterface) -> str:
    """Return the directory to scan for *path*, falling back to the configured default."""
    cleaned = clean_dir(path)
    if cleaned:
        return cleaned
    configured = clean_dir(environment.lookup(SECRETS_DIR_VAR) or "")
    return configured or DEFAULT_SECRETS_DIR


def resolve_log_impl(environment: EnvironmentInterface) -> str:
    """Logger implementation name from the environment; unknown names fall back to the default."""
    name = (environment.lookup(LOG_IMPL_VAR) or "").strip().lower()
    if name in LOGGERS:
        return name
    return DEFAULT_LOG_IMPL
