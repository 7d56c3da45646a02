import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


# ----- Environment helpers -----
def get_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-insecure-secret-key")
DEBUG = get_bool("DJANGO_DEBUG", True)

_hosts_env = os.getenv("DJANGO_ALLOWED_HOSTS", "127.0.0.1,localhost")
ALLOWED_HOSTS = [h.strip() for h in _hosts_env.split(",") if h.strip()]


# ----- Applications -----
INSTALLED_APPS = [
    # Local apps
    "sequences",
]


# ----- Database -----
# No models are defined; declared so Django's tooling has a default alias.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}


# ----- Internationalization -----
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True


# ----- Container demo -----
# Print each container's contents after every demo step.
SEQUENCES_DEMO_VERBOSE = get_bool("SEQUENCES_DEMO_VERBOSE", False)


# ----- Logging -----
LOG_LEVEL = "DEBUG" if DEBUG else os.getenv("DJANGO_LOG_LEVEL", "INFO")
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "[%(levelname)s] %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s [%(levelname)s] %(name)s (%(module)s:%(lineno)d): %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple" if DEBUG else "verbose",
        }
    },
    "root": {"handlers": ["console"], "level": LOG_LEVEL},
}


DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
