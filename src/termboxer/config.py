"""termboxer configuration

Settings are grouped by concern:
- Fill / separator characters used during composition
- Placeholder messages shown by the Boxer
- Logging and metrics
"""

import os

# === Composition ===
FILL_CHAR = " "  # right padding of leaf lines and blank fill lines
HORIZONTAL_SEPARATOR = os.environ.get("TERMBOXER_HSEP", "─")  # between vertically stacked children
VERTICAL_SEPARATOR = os.environ.get("TERMBOXER_VSEP", "│")  # between horizontally arranged children
NEWLINE = "\n"

# === Placeholders ===
WAITING_MESSAGE = "waiting for size information"  # view() before the first size update
INSUFFICIENT_SPACE_MESSAGE = "terminal too small"  # safe_view() fallback

# === Logging ===
LOG_LEVEL = os.environ.get("TERMBOXER_LOG_LEVEL", "INFO")

# === Metrics ===
METRICS_ENABLED = True
