"""Central configuration defaults and constants for Platypor."""

import os

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_PACKAGE_DATA_DIR = os.path.join(_PACKAGE_DIR, "data")

# Logging
DEFAULT_LOG_LEVEL = os.getenv("PLATYPOR_LOG_LEVEL", "INFO").upper()

# Frame timer cadence expected from the driving client
DEFAULT_TICK_INTERVAL_MS = int(os.getenv("PLATYPOR_TICK_INTERVAL_MS", "33"))

# Simulation defaults
DEFAULT_MAX_TICK_DELTA = float(os.getenv("PLATYPOR_MAX_TICK_DELTA", "0.1"))  # Prevents large jumps after a stall
DEFAULT_DIALOGUE_INTERVAL = float(os.getenv("PLATYPOR_DIALOGUE_INTERVAL", "10"))  # Seconds between ambient lines
DEFAULT_DEATH_EXIT_CODE = int(os.getenv("PLATYPOR_DEATH_EXIT_CODE", "666"))
DEFAULT_STARTING_MONEY = float(os.getenv("PLATYPOR_STARTING_MONEY", "0"))

# Random source seed - unset means a fresh process-wide seed
_rng_seed_env = os.getenv("PLATYPOR_RNG_SEED")
DEFAULT_RNG_SEED = int(_rng_seed_env) if _rng_seed_env else None

# Content files
DEFAULT_CATALOG_PATH = os.getenv("PLATYPOR_CATALOG_PATH", os.path.join(_PACKAGE_DATA_DIR, "buttons.json"))
DEFAULT_DIALOGUES_PATH = os.getenv("PLATYPOR_DIALOGUES_PATH", os.path.join(_PACKAGE_DATA_DIR, "dialogues.json"))
DEFAULT_BALANCE_PATH = os.getenv("PLATYPOR_BALANCE_PATH")  # Optional JSON overrides for GameBalance

# Where the literacy marker gets written once the player learns to read
DEFAULT_STATE_DIR = os.getenv("PLATYPOR_STATE_DIR", os.path.join(os.path.expanduser("~"), ".platypor"))
