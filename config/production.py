import os

from .config import *  # noqa: F401,F403
from .config import env_flag

JWT_SECRET = os.getenv("JWT_SECRET", "please-set-JWT_SECRET")

DEBUG = False

EXTENDED_HOURS_MODE = env_flag("EXTENDED_HOURS_MODE", "0")

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
