import os

# Logging
LOG_LEVEL = os.getenv("AUDIT_LOG_LEVEL", "INFO").upper()

# Scoring
# "weighted-metric" or "uniform-check"
SCORE_POLICY = os.getenv("AUDIT_SCORE_POLICY", "weighted-metric").strip().lower()
DEFAULT_MODE = os.getenv("AUDIT_DEFAULT_MODE", "desktop")

# DOM Content Loaded passes strictly below this many milliseconds
DCL_CEILING_MS = int(os.getenv("AUDIT_DCL_CEILING_MS", "4000"))

# Page driver
NAV_TIMEOUT_MS = int(os.getenv("AUDIT_NAV_TIMEOUT_MS", "60000"))
