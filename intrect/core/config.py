# Module: runtime flags.
# Main: DEBUG_CLAMP.
# Example: from intrect.core import config; config.DEBUG_CLAMP = True

import os

# ---- Debug ----
# True = print every clamp that changes a value (op, field, raw -> clamped)
DEBUG_CLAMP = os.getenv("INTRECT_DEBUG_CLAMP", "0") == "1"
