import os


def _build_uri_from_parts():
    host = os.getenv("DB_HOST", "localhost")
    port = os.getenv("DB_PORT", "5432")
    name = os.getenv("DB_NAME", "casetracker")
    user = os.getenv("DB_USER", "postgres")
    pwd = os.getenv("DB_PASSWORD") or ""

    auth = f"{user}:{pwd}" if pwd else user
    return f"postgresql+psycopg2://{auth}@{host}:{port}/{name}"


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "clave-super-secreta")

    # Usa una de dos: DATABASE_URL o las partes DB_*
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL") or _build_uri_from_parts()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Listado de casos
    CASES_PER_PAGE = int(os.getenv("CASES_PER_PAGE", "25"))
    CASES_MAX_PER_PAGE = int(os.getenv("CASES_MAX_PER_PAGE", "100"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    INIT_DB = os.getenv("INIT_DB") == "1"

    SESSION_PERMANENT = True
    SESSION_COOKIE_SAMESITE = "Lax"
    SESSION_COOKIE_SECURE = False  # ponlo True si usas HTTPS
