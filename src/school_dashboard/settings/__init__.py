import os


def get_settings_module() -> str:
    # APP_ENV selects the settings module; default is development.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "school_dashboard.settings.production"

    if env in {"test", "testing"}:
        return "school_dashboard.settings.testing"

    return "school_dashboard.settings.development"
