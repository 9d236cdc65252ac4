"""Runtime settings for Ping, read from the environment."""

import os

# Where uvicorn binds
HOST = os.environ.get("PING_HOST", "0.0.0.0")
PORT = int(os.environ.get("PING_PORT", "8080"))
RELOAD = os.environ.get("PING_RELOAD", "").lower() in ("1", "true", "yes")

# Upstream client timeouts, in seconds
UPSTREAM_TIMEOUT = float(os.environ.get("PING_UPSTREAM_TIMEOUT", "30"))
UPSTREAM_CONNECT_TIMEOUT = float(os.environ.get("PING_UPSTREAM_CONNECT_TIMEOUT", "5"))

LOG_LEVEL = os.environ.get("PING_LOG_LEVEL", "INFO").upper()
