import os


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "clubhive.settings.production"

    if env in {"test", "testing"}:
        return "clubhive.settings.testing"

    return "clubhive.settings.development"
