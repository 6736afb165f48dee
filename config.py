import os

# Log level for the Flask app logger (DEBUG, INFO, WARNING, ...)
LOG_LEVEL = (os.environ.get("LOG_LEVEL") or "INFO").strip().upper()

# Seed the Colombian holiday rules when the rule table is empty.
# Handle empty SEED_DEFAULT_RULES gracefully (e.g. SEED_DEFAULT_RULES="" in env)
_seed_raw = os.environ.get("SEED_DEFAULT_RULES")
if _seed_raw and _seed_raw.strip():
    SEED_DEFAULT_RULES = _seed_raw.strip().lower() == "true"
else:
    SEED_DEFAULT_RULES = True
