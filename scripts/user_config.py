"""recur User Configuration.

This is the user-facing configuration file. Modify settings here to customize
processing. Expert defaults live in recur.schemas.param.

Usage:
    recur-levels scripts/user_config.py
    recur-levels scripts/user_config.py --level 3 --check
"""

CONFIG = {
    # ========================================================================
    # INPUT / OUTPUT
    # ========================================================================
    "DATA_DIR": ".",              # Folder holding level-1/, level-2/, ...
    "EXAMPLES": {1: 5, 2: 5, 3: 6, 4: 8},  # Example files per level

    # ========================================================================
    # SHAPE MATCHING
    # ========================================================================
    "EQUALITY_MAPPER": "binary",  # "binary": same silhouette, "exact": same values
    "REQUIRE_SAME_DIMENSIONS": True,

    # ========================================================================
    # PERIODICITY
    # ========================================================================
    "MIN_OCCURRENCES": 4,         # Sightings a run must fit before the end timestamp
    "CHECK_ROTATIONS": False,

    # ========================================================================
    # LOGGING
    # ========================================================================
    "LOG_LEVEL": "INFO",
    "LOG_FILE": None,             # e.g. "logs/recur.log"
}
