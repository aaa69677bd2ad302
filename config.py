from dotenv import load_dotenv
import os

load_dotenv()

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///ayora.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Test connections before use; Postgres drops idle connections
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,
    }

    JWT_EXPIRES_HOURS = int(os.getenv("JWT_EXPIRES_HOURS", "168"))

    # Nutrition analysis microservice (see ai_stub)
    AI_SERVICE_URL = os.getenv("AI_SERVICE_URL", "http://localhost:8000")
    AI_SERVICE_TIMEOUT = float(os.getenv("AI_SERVICE_TIMEOUT", "5"))

    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", os.path.join(BASE_DIR, "uploads"))
    MAX_CONTENT_LENGTH = 25 * 1024 * 1024
    MAX_IMAGE_BYTES = 10 * 1024 * 1024
    MAX_AUDIO_BYTES = 25 * 1024 * 1024

    FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
