from .config import *  # noqa: F401,F403

JWT_SECRET = "test-secret"

DEBUG = False
TESTING = True

EXTENDED_HOURS_MODE = False

AUTO_INIT_DB = False
AUTO_SEED_DB = False
