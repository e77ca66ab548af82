import os

# DB
DB_USER = os.getenv("DB_USER", "medassist")
DB_PASS = os.getenv("DB_PASS", "medassist")
DB_NAME = os.getenv("DB_NAME", "medassist")
DB_HOST = os.getenv("DB_HOST", "postgres")
DB_PORT = os.getenv("DB_PORT", "5432")

DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"postgresql+psycopg2://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
)

# JWT
AUTH_SECRET = os.getenv("AUTH_SECRET", "dev-secret-change-me")
ACCESS_TTL_SECONDS = int(os.getenv("ACCESS_TTL_SECONDS", "86400"))     # 24h
REFRESH_TTL_SECONDS = int(os.getenv("REFRESH_TTL_SECONDS", "604800"))  # 7d

BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

ISSUER = "medassist-auth"
ALGO = "HS256"

# Session cookie
COOKIE_NAME = "auth-token"
COOKIE_SECURE = os.getenv("COOKIE_SECURE", "false").lower() == "true"

# LLM
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
OPENAI_TIMEOUT_SECONDS = float(os.getenv("OPENAI_TIMEOUT_SECONDS", "60"))

# Search cache
REDIS_URL = os.getenv("REDIS_URL", "redis://redis:6379/0")
CACHE_TTL_SECONDS = int(os.getenv("CACHE_TTL_SECONDS", "120"))
SEARCH_CACHE_ENABLED = os.getenv("SEARCH_CACHE_ENABLED", "1") == "1"

DEFAULT_RADIUS_MILES = float(os.getenv("DEFAULT_RADIUS_MILES", "25"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
