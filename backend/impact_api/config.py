import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()

DEFAULT_SLUG = "impact-report"
DEFAULT_ORIGINS = ["http://localhost:5173", "http://localhost:3000"]


def _split(value):
    return [item.strip() for item in (value or "").split(",") if item.strip()]


class BaseConfig:
    ENV_NAME = os.getenv("APP_ENV", "development")
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Auth gate: "jwt" or "api_key"
    AUTH_STRATEGY = os.getenv("AUTH_STRATEGY", "jwt")
    ADMIN_API_KEY = os.getenv("ADMIN_API_KEY")

    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY") or os.getenv("SESSION_SECRET", "dev-jwt-secret")
    JWT_TOKEN_LOCATION = ["headers", "cookies"]
    JWT_ACCESS_COOKIE_NAME = "auth_token"
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=7)
    JWT_SESSION_COOKIE = False
    JWT_COOKIE_CSRF_PROTECT = False
    JWT_COOKIE_SECURE = False
    JWT_COOKIE_SAMESITE = "Lax"

    S3_BUCKET = os.getenv("S3_BUCKET")
    AWS_REGION = os.getenv("AWS_REGION", "us-east-1")
    AWS_ACCESS_KEY_ID = os.getenv("AWS_ACCESS_KEY_ID")
    AWS_SECRET_ACCESS_KEY = os.getenv("AWS_SECRET_ACCESS_KEY")
    CDN_BASE_URL = os.getenv("CDN_BASE_URL")
    UPLOAD_URL_EXPIRES = 60

    FRONTEND_URL = os.getenv("FRONTEND_URL")
    ALLOWED_ORIGINS = DEFAULT_ORIGINS + _split(os.getenv("FRONTEND_URL")) + _split(os.getenv("ALLOWED_ORIGINS"))


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///impact-report.db")


class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")
    JWT_COOKIE_SECURE = True
    JWT_COOKIE_SAMESITE = "None"


class TestingConfig(BaseConfig):
    TESTING = True
    ENV_NAME = "test"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "test-jwt-secret"
    ADMIN_API_KEY = "test-admin-key"
    S3_BUCKET = "impact-test-bucket"
    AWS_REGION = "us-east-1"
    AWS_ACCESS_KEY_ID = "testing"
    AWS_SECRET_ACCESS_KEY = "testing"
    CDN_BASE_URL = None


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
