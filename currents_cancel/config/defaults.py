"""currents_cancel.config.defaults
===============================

Central place for the small, stable constants used by the cancellation
invoker. Values here have no I/O and import nothing from the rest of the
package so every layer can depend on them without cycles.
"""

from __future__ import annotations

# ---- Action inputs ----
# Names of the required inputs, in the order they are validated.
INPUT_CURRENTS_API_URL = "currents-api-url"
INPUT_BEARER_TOKEN = "bearer-token"
INPUT_GITHUB_RUN_ID = "github-run-id"
INPUT_GITHUB_RUN_ATTEMPT = "github-run-attempt"

REQUIRED_INPUTS = (
    INPUT_CURRENTS_API_URL,
    INPUT_BEARER_TOKEN,
    INPUT_GITHUB_RUN_ID,
    INPUT_GITHUB_RUN_ATTEMPT,
)

# Prefix the runner uses when exposing step inputs as environment variables.
INPUT_ENV_PREFIX = "INPUT_"
# Set to "1" by the runner when step debug logging is enabled.
RUNNER_DEBUG_ENV = "RUNNER_DEBUG"

# ---- HTTP layer ----
CANCEL_BY_GITHUB_CI_PATH = "/runs/cancel-by-github-ci"
USER_AGENT = "cancel-currents-run-action"
ALLOWED_URL_SCHEMES = ("http", "https")

# ---- Retry policy ----
RETRY_MAX_RETRIES = 3
RETRY_MIN_DELAY_SECONDS = 1.0
RETRY_MAX_DELAY_SECONDS = 10.0
RETRY_BACKOFF_FACTOR = 2.0

# ---- Logging ----
LOG_LEVEL_ENV = "CURRENTS_LOG_LEVEL"
LOG_FORMAT_ENV = "CURRENTS_LOG_FORMAT"
LOG_FORMATS = ("workflow", "json", "plain")
DEFAULT_LOG_FORMAT = "workflow"

# ---- Timeouts ----
HTTP_TIMEOUT_ENV = "CURRENTS_HTTP_TIMEOUT_SECONDS"

__all__ = [
    "INPUT_CURRENTS_API_URL",
    "INPUT_BEARER_TOKEN",
    "INPUT_GITHUB_RUN_ID",
    "INPUT_GITHUB_RUN_ATTEMPT",
    "REQUIRED_INPUTS",
    "INPUT_ENV_PREFIX",
    "RUNNER_DEBUG_ENV",
    "CANCEL_BY_GITHUB_CI_PATH",
    "USER_AGENT",
    "ALLOWED_URL_SCHEMES",
    "RETRY_MAX_RETRIES",
    "RETRY_MIN_DELAY_SECONDS",
    "RETRY_MAX_DELAY_SECONDS",
    "RETRY_BACKOFF_FACTOR",
    "LOG_LEVEL_ENV",
    "LOG_FORMAT_ENV",
    "LOG_FORMATS",
    "DEFAULT_LOG_FORMAT",
    "HTTP_TIMEOUT_ENV",
]
