# Serverless entry point: the platform imports `app` and serves it as WSGI.
import os

from impact_api import create_app

app = create_app(os.getenv("APP_ENV", "production"))
