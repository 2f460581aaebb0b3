# ========================
# config.py
# ========================

import os
from dotenv import load_dotenv

load_dotenv()
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# =========================
# Flask settings
# =========================
class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-key")
    SQLALCHEMY_DATABASE_URI = os.getenv(
        "DATABASE_URL", "sqlite:///" + os.path.join(BASE_DIR, "database.db")
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # OAuth app registered with GitHub; login only works with this exact id.
    GITHUB_CLIENT_ID = os.getenv("GITHUB_CLIENT_ID", "7f6709819023e9215205")

    HOLE_CSS_PATH = os.getenv("HOLE_CSS_PATH", "/static/hole.css")
    HOLE_JS_PATH = os.getenv("HOLE_JS_PATH", "/static/hole.js")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE_PATH = os.getenv("LOG_FILE_PATH")


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-key"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    LOG_LEVEL = "DEBUG"
    LOG_FILE_PATH = None
