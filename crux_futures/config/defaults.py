"""crux_futures.config.defaults
============================

Central place for small, stable default values used across the crux_futures
package. These defaults can be overridden via environment variables, but
provide sensible fallbacks for library use and tests.

This module intentionally avoids importing from other packages to prevent
circular dependencies. Only plain constants should live here.
"""

from __future__ import annotations

# ---- Logging ----

# Library default: quiet unless the host application asks for more.
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_JSON = True

# Name of the shared base logger every module logger propagates to.
BASE_LOGGER_NAME = "crux_futures"

# ---- Metrics ----
DEFAULT_METRICS_ENABLED = True

# ---- Environment variable names ----
ENV_LOG_LEVEL = "CRUX_FUTURES_LOG_LEVEL"
ENV_LOG_JSON = "CRUX_FUTURES_LOG_JSON"
ENV_METRICS = "CRUX_FUTURES_METRICS"
