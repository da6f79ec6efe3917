import os
import logging
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger("app")

APP_ENV = os.getenv("APP_ENV", "production")
IS_DEBUG = APP_ENV == "development"

# Rationale: 환경 변수(DATABASE_URL)를 우선 사용하여, 테스트/배포 환경별 DB를 교체할 수 있도록 함.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./radio_library.db")

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
# 캐시 백엔드 장애 시 요청이 오래 묶이지 않도록 짧은 타임아웃을 사용
REDIS_SOCKET_TIMEOUT = float(os.getenv("REDIS_SOCKET_TIMEOUT", "2"))

LIVE_STATIONS_CACHE_TTL = int(os.getenv("LIVE_STATIONS_CACHE_TTL", "3600"))
LIVE_STATIONS_DEFAULT_LIMIT = int(os.getenv("LIVE_STATIONS_DEFAULT_LIMIT", "100"))

RADIO_BROWSER_BASE_URL = os.getenv("RADIO_BROWSER_BASE_URL", "https://de1.api.radio-browser.info/json")
RADIO_BROWSER_TIMEOUT = float(os.getenv("RADIO_BROWSER_TIMEOUT", "10"))

_DEV_JWT_SECRET = "dev-only-radio-library-secret"
JWT_SECRET = os.getenv("JWT_SECRET") or _DEV_JWT_SECRET
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRES_MINUTES = int(os.getenv("JWT_EXPIRES_MINUTES", "60"))

if JWT_SECRET == _DEV_JWT_SECRET and not IS_DEBUG:
    logger.warning("JWT_SECRET is not set; falling back to the development secret.")

RATE_LIMIT_PER_MINUTE = int(os.getenv("RATE_LIMIT_PER_MINUTE", "60"))

LOG_DIR = os.getenv("LOG_DIR", "logs")

# CORS 허용 오리진 (환경변수 기반)
def _parse_origins(value: str | None) -> list[str]:
    if not value:
        return []
    normalized = value.replace("\n", ",").replace(";", ",")
    items = [item.strip() for item in normalized.split(",")]
    return [item for item in items if item]

_DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:8081",
    "http://127.0.0.1:8081",
    "http://localhost:19006",
    "http://127.0.0.1:19006",
]

# 우선순위: CORS_ALLOWED_ORIGINS(복수) > FRONTEND_ORIGINS(복수) > FRONTEND_URL(단일)
_cors_allowed_origins = _parse_origins(os.getenv("CORS_ALLOWED_ORIGINS"))
_frontend_origins = _parse_origins(os.getenv("FRONTEND_ORIGINS"))
_single_frontend_url = [os.getenv("FRONTEND_URL")] if os.getenv("FRONTEND_URL") else []

# 중복 제거를 위해 dict 키 보존 방식 사용
ALLOWED_ORIGINS = list(dict.fromkeys(_DEFAULT_ALLOWED_ORIGINS + _cors_allowed_origins + _frontend_origins + _single_frontend_url))
