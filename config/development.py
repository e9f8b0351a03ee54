import os

from .config import *  # noqa: F401,F403
from .config import env_flag

JWT_SECRET = os.getenv("JWT_SECRET", "dev-jwt-secret")

DEBUG = True

# Any day is admissible until 22:00 (+ tolerance) while testing on devices
EXTENDED_HOURS_MODE = env_flag("EXTENDED_HOURS_MODE", "1")

# apply database/schema.sql at startup (CREATE TABLE IF NOT EXISTS only)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
# default settings rows + demo accounts at startup
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
