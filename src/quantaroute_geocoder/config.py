"""
Process-wide gateway settings.

Read once at startup and injected into the Gateway; nothing reads the
environment while handling a request.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from .constants import EnvVar, QuantaRouteConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GatewaySettings:
    """Backend location, transport timeout and the fallback API key."""

    api_key: str | None = None
    base_url: str = QuantaRouteConfig.BASE_URL
    timeout: float = QuantaRouteConfig.TIMEOUT_SECONDS

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GatewaySettings":
        """Build settings from QUANTAROUTE_* environment variables."""
        env = os.environ if environ is None else environ

        timeout = QuantaRouteConfig.TIMEOUT_SECONDS
        raw_timeout = env.get(EnvVar.QUANTAROUTE_TIMEOUT)
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                logger.warning(
                    "Ignoring invalid %s=%r, using %.1fs",
                    EnvVar.QUANTAROUTE_TIMEOUT,
                    raw_timeout,
                    timeout,
                )

        return cls(
            api_key=env.get(EnvVar.QUANTAROUTE_API_KEY) or None,
            base_url=env.get(EnvVar.QUANTAROUTE_BASE_URL) or QuantaRouteConfig.BASE_URL,
            timeout=timeout,
        )
