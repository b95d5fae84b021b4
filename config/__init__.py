import os

_ENV_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    """Settings module for the current environment.

    ``ATTENDANCE_SETTINGS_MODULE`` names a module explicitly; otherwise
    ``APP_ENV`` picks one, falling back to development.
    """
    explicit = os.getenv("ATTENDANCE_SETTINGS_MODULE")
    if explicit:
        return explicit

    env = os.getenv("APP_ENV", "development").lower()
    return _ENV_MODULES.get(env, "config.development")
