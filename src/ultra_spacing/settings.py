"""Global configuration for the spacing package."""

from __future__ import annotations

import os
from typing import Final

# Optional JSON file replacing the built-in breakpoint tables
TABLES_PATH: Final = os.environ.get("ULTRA_SPACING_TABLES", "").strip() or None

# Guard the module-level default caches with a lock
THREAD_SAFE_DEFAULT_CACHES: Final = os.environ.get(
    "ULTRA_SPACING_THREAD_SAFE", ""
).strip().lower() in ("1", "true", "yes")

# Base unit of the smallest breakpoint; Figma scaling is relative to it
REFERENCE_BASE_UNIT: Final = 4.0
