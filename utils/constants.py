import json
from config.paths import CONSTANTS_PATH

"""
Loads configuration constants from config/constants.json and exposes them as module-level variables.
Edit constants.json to change values; import from utils.constants to use in code.
"""

with open(CONSTANTS_PATH, "r", encoding="utf-8") as f:
    _constants = json.load(f)

# Expose constants as variables
QUARTERS = tuple(_constants["QUARTERS"])
PLAYERS_ON_COURT = _constants["PLAYERS_ON_COURT"]
QUARTER_DURATION_MINUTES = _constants["QUARTER_DURATION_MINUTES"]
DEFAULT_SUBSTITUTE_MINUTES = _constants["DEFAULT_SUBSTITUTE_MINUTES"]

DEFAULT_PLAN_NAME = _constants["DEFAULT_PLAN_NAME"]
UNTITLED_PLAN_NAME = _constants["UNTITLED_PLAN_NAME"]
UNNAMED_PLAYER_NAME = _constants["UNNAMED_PLAYER_NAME"]
