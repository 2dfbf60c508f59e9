import os


def get_settings_module() -> str:
    # Ambiente vem de APP_ENV, padrão 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "extras_control.settings.production"

    if env in {"test", "testing"}:
        return "extras_control.settings.testing"

    return "extras_control.settings.development"
