import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.favorites import router as favorites_router
from app.api.station_lists import router as station_lists_router
from app.api.stations import router as stations_router
from app.core.config import ALLOWED_ORIGINS, LOG_DIR, RADIO_BROWSER_TIMEOUT
from app.core.database import init_db
from app.core.limiter import limiter
from app.core.logging_config import setup_logging
from app.core.middleware import CacheControlMiddleware, TraceIDMiddleware
from app.core.redis_client import get_redis_client
from app.exception.base_exception import BaseCustomException
from app.exception.envelope_handlers import (
    custom_exception_handler,
    global_exception_handler_envelope,
    http_exception_handler,
    rate_limit_exception_handler,
    validation_exception_handler,
)

# 로깅 설정(콘솔 + 일자별 파일 로테이션, JSON 포맷)
setup_logging(LOG_DIR)

logger = logging.getLogger("app")

USER_AGENT = "radio-library/0.1 (+https://www.radio-browser.info)"


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    # 외부 디렉토리 호출용 AsyncClient는 앱 수명 동안 재사용
    app.state.http = httpx.AsyncClient(
        timeout=RADIO_BROWSER_TIMEOUT,
        headers={"User-Agent": USER_AGENT},
        follow_redirects=True,
    )
    logger.info("Radio library service started")
    try:
        yield
    finally:
        await app.state.http.aclose()
        await get_redis_client().aclose()
        # 다음 lifespan(테스트 재기동 등)은 새 이벤트 루프에서 새 클라이언트를 사용
        get_redis_client.cache_clear()
        logger.info("Radio library service stopped")


app = FastAPI(title="Radio Library API", lifespan=lifespan)

app.state.limiter = limiter

app.add_middleware(CacheControlMiddleware)
app.add_middleware(TraceIDMiddleware)

# CORS 설정 (환경변수 기반)
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Trace-ID"],
)


@app.get("/ping")
def ping():
    return {"ok": True}


# API 라우터 포함
app.include_router(favorites_router)
app.include_router(station_lists_router)
app.include_router(stations_router)

# 예외 핸들러 (모든 응답을 ApiResponse envelope로 통일)
app.add_exception_handler(BaseCustomException, custom_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(RateLimitExceeded, rate_limit_exception_handler)
app.add_exception_handler(Exception, global_exception_handler_envelope)
