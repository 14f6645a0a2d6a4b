"""Environment-variable-based configuration for the progress report."""

from __future__ import annotations

import os

FITNESS_API_URL: str = os.environ.get("FITNESS_API_URL", "http://localhost:8080/api")
FITNESS_API_USERNAME: str = os.environ.get("FITNESS_API_USERNAME", "")
FITNESS_API_PASSWORD: str = os.environ.get("FITNESS_API_PASSWORD", "")
FITNESS_API_TIMEOUT_S: float = float(os.environ.get("FITNESS_API_TIMEOUT_S", "10"))
FITNESS_USER_ID: str = os.environ.get("FITNESS_USER_ID", "")
