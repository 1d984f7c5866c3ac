import os

_ENVIRONMENTS = {
    "production": "config.production",
    "prod": "config.production",
    "testing": "config.testing",
    "test": "config.testing",
}


def get_settings_module() -> str:
    # Chọn module cấu hình theo APP_ENV, mặc định là development
    env = os.getenv("APP_ENV", "development").strip().lower()
    return _ENVIRONMENTS.get(env, "config.development")
