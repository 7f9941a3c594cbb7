import os

_ENVIRONMENTS = {
    "dev": "config.development",
    "development": "config.development",
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    """Settings module named by APP_ENV; unset or empty means development."""
    env = os.getenv("APP_ENV", "").strip().lower() or "development"
    try:
        return _ENVIRONMENTS[env]
    except KeyError:
        allowed = ", ".join(sorted(_ENVIRONMENTS))
        raise ValueError(f"unknown APP_ENV {env!r} (expected one of: {allowed})") from None
