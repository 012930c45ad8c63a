from .config import *  # noqa: F401,F403

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False

# Reproducible estimated heatmaps in tests
FALLBACK_HEATMAP_SEED = 1234
