"""Module configuration.

ModuleConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from hrmodule.errors import ConfigurationError

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off", "")

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass(frozen=True, slots=True)
class ModuleConfig:
    """Module configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ModuleConfig(base_url="https://shell.example.com", timeout=10.0)
    """

    # Remote API
    base_url: str = "http://localhost:7788"
    module_base_path: str = "/admin/v1/modules/hr/v1"
    admin_base_path: str = "/admin/admin/v1"
    timeout: float = 30.0

    # Registration
    strict_registration: bool = False

    # i18n
    locale_fallback: str = "en-US"

    # Logging
    log_level: str = "warning"

    @property
    def module_url(self) -> str:
        """Absolute URL every entity-service call is issued against."""
        return self.base_url.rstrip("/") + self.module_base_path

    @property
    def admin_url(self) -> str:
        """Absolute URL of the host-scoped administrative API."""
        return self.base_url.rstrip("/") + self.admin_base_path

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ModuleConfig":
        """Build a config from ``HRMODULE_*`` environment variables.

        Unset variables keep their defaults. Malformed values raise
        ``ConfigurationError`` instead of being silently ignored.
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}

        if "HRMODULE_BASE_URL" in env:
            overrides["base_url"] = env["HRMODULE_BASE_URL"]

        if "HRMODULE_TIMEOUT" in env:
            raw = env["HRMODULE_TIMEOUT"]
            try:
                timeout = float(raw)
            except ValueError:
                msg = f"HRMODULE_TIMEOUT must be a number of seconds, got {raw!r}"
                raise ConfigurationError(msg) from None
            if timeout <= 0:
                msg = f"HRMODULE_TIMEOUT must be positive, got {raw!r}"
                raise ConfigurationError(msg)
            overrides["timeout"] = timeout

        if "HRMODULE_STRICT_REGISTRATION" in env:
            raw = env["HRMODULE_STRICT_REGISTRATION"].strip().lower()
            if raw in _TRUE:
                overrides["strict_registration"] = True
            elif raw in _FALSE:
                overrides["strict_registration"] = False
            else:
                msg = f"HRMODULE_STRICT_REGISTRATION must be a boolean, got {raw!r}"
                raise ConfigurationError(msg)

        if "HRMODULE_LOG_LEVEL" in env:
            raw = env["HRMODULE_LOG_LEVEL"].strip().lower()
            if raw not in LOG_LEVELS:
                msg = f"HRMODULE_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {raw!r}"
                raise ConfigurationError(msg)
            overrides["log_level"] = raw

        return cls(**overrides)  # type: ignore[arg-type]
