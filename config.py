import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./authflow.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 5000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    ENVIRONMENT = data.get("ENVIRONMENT", "development")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["http://localhost:3000"])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRE_DAYS = int(data.get("JWT_EXPIRE_DAYS", 7))
    RESET_TOKEN_EXPIRE_MINUTES = int(data.get("RESET_TOKEN_EXPIRE_MINUTES", 15))
    PASSWORD_MIN_LENGTH = int(data.get("PASSWORD_MIN_LENGTH", 6))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    FRONTEND_URL = data.get("FRONTEND_URL", "http://localhost:3000")
    SMTP_HOST = data.get("SMTP_HOST", "localhost")
    SMTP_PORT = int(data.get("SMTP_PORT", 587))
    SMTP_USER = data.get("SMTP_USER", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_USE_SSL = bool(data.get("SMTP_USE_SSL", SMTP_PORT == 465))
    SMTP_USE_STARTTLS = bool(data.get("SMTP_USE_STARTTLS", not SMTP_USE_SSL))
    SMTP_TIMEOUT = float(data.get("SMTP_TIMEOUT", 10))
    EMAIL_FROM = data.get("EMAIL_FROM", "no-reply@localhost")
