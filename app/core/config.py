from os import getenv

class Settings:
    DATABASE_URL = getenv("DATABASE_URL", "postgresql+psycopg://todotracker:todotracker@db:5432/todotracker")
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO")
    # origines autorisées pour le front, séparées par des virgules
    CORS_ORIGINS = [o.strip() for o in getenv("CORS_ORIGINS", "http://localhost:5173").split(",") if o.strip()]
    API_BASE_URL = getenv("API_BASE_URL", "http://localhost:8000")

settings = Settings()
