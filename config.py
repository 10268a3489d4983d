"""Runtime configuration read from the environment."""

import os

# Served at "/" when no index page is bundled with the deployment.
INDEX_MESSAGE: str = os.environ.get(
    "INDEX_MESSAGE",
    "This service is running. No index page is bundled with this build.",
)

LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"

PORT: int = int(os.environ.get("PORT", "8000"))
