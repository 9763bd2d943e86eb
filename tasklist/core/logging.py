import sys
from datetime import datetime
from typing import Any

from tasklist.core.config import settings


# ═══════════════════════════════════════════════════════════════════════════════
# LOG FILTERING
# ═══════════════════════════════════════════════════════════════════════════════
# Only these scopes are shown at INFO level
# Everything else is gated behind DEBUG

INFO_SCOPES = {
    "STARTUP",  # Lifespan
    "DB",       # Connection state
    "TASKS",    # Request boundary
    "EXPIRY",   # Retention sweep
}

# DEBUG-only scopes (hidden by default)
DEBUG_SCOPES = {
    "STORE",
    "ROUTES",
    "MONITORING",
}


def log(scope: str, message: str, data: Any = None) -> None:
    """
    Unified logging function for the task list service.

    Only INFO_SCOPES are shown by default.
    Set TASKLIST_DEBUG=true to see all scopes.
    """
    if not settings.debug and scope not in INFO_SCOPES:
        return

    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] [{scope}] {message}")

    if data:
        print(f"  Data: {data}")

    sys.stdout.flush()


def log_section(scope: str, title: str) -> None:
    """
    Log a section header with visual separator.
    """
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"\n{'='*60}")
    print(f"[{timestamp}] [{scope}] {title}")
    print(f"{'='*60}")
    sys.stdout.flush()
