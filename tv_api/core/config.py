import os
from urllib.parse import quote_plus
from dotenv import load_dotenv

load_dotenv()


def _build_database_url():
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    # Same DB_* variables the postgres deployment uses
    host = os.getenv("DB_HOST")
    if host:
        user = os.getenv("DB_USER", "")
        password = quote_plus(os.getenv("DB_PASSWORD", ""))
        port = os.getenv("DB_PORT", "5432")
        name = os.getenv("DB_NAME", "tvapp")
        return f"postgresql://{user}:{password}@{host}:{port}/{name}"

    return "sqlite:///./tvapp.db"


class Settings:
    # SERVER
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3001"))

    # DATABASE
    DATABASE_URL = _build_database_url()

    # DOCS (Swagger UI at /api-docs)
    ENABLE_DOCS = os.getenv("ENABLE_DOCS", "false").lower() == "true"
    API_BASE_URL = os.getenv("API_BASE_URL", f"http://localhost:{PORT}")

    # CORS
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
