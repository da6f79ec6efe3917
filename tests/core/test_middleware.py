"""
미들웨어 통합 테스트 모듈

Rationale:
    httpx.AsyncClient + ASGITransport를 사용하여 실제 FastAPI 앱에
    요청을 보내고, 미들웨어 체인 전체의 동작을 E2E로 검증합니다.
"""

import uuid
import logging
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from app.main import app


# =============================================================================
# Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client():
    """미들웨어 통합 테스트용 AsyncClient Fixture"""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac


# =============================================================================
# TraceIDMiddleware 테스트
# =============================================================================

class TestTraceIDMiddleware:
    """
    TraceIDMiddleware 통합 테스트

    Rationale:
        Trace ID가 올바르게 생성·전파·반환되는지 검증합니다.
        클라이언트가 ID를 보내는 경우와 보내지 않는 경우 모두 커버합니다.
    """

    @pytest.mark.asyncio
    async def test_trace_id_auto_generated(self, client):
        """Trace ID 미전송 시 UUIDv4가 자동 생성되어 응답 헤더에 포함되는지 검증"""
        response = await client.get("/ping")

        trace_id = response.headers.get("X-Trace-ID")
        assert trace_id is not None, "X-Trace-ID 응답 헤더가 없습니다"

        # NOTE: UUIDv4 형식인지 검증 (하이픈 포함 36자)
        parsed = uuid.UUID(trace_id, version=4)
        assert str(parsed) == trace_id

    @pytest.mark.asyncio
    async def test_trace_id_passthrough(self, client):
        """클라이언트가 보낸 UUID 형식의 X-Trace-ID가 그대로 응답에 반환되는지 검증"""
        custom_trace_id = str(uuid.uuid4())
        response = await client.get(
            "/ping", headers={"X-Trace-ID": custom_trace_id}
        )

        assert response.headers.get("X-Trace-ID") == custom_trace_id

    @pytest.mark.asyncio
    async def test_invalid_trace_id_replaced(self, client):
        """UUID 형식이 아닌 Trace ID는 무시하고 새로 발급하는지 검증"""
        response = await client.get(
            "/ping", headers={"X-Trace-ID": "<script>alert(1)</script>"}
        )

        trace_id = response.headers.get("X-Trace-ID")
        assert trace_id != "<script>alert(1)</script>"
        uuid.UUID(trace_id)

    @pytest.mark.asyncio
    async def test_ping_not_logged(self, client, caplog):
        """/ping 요청은 접근 로그를 남기지 않는지 검증"""
        with caplog.at_level(logging.INFO, logger="app.core.middleware"):
            response = await client.get("/ping")

        assert response.status_code == 200
        ping_logs = [
            r for r in caplog.records
            if r.name == "app.core.middleware" and "/ping" in r.getMessage()
        ]
        assert len(ping_logs) == 0, "/ping 경로에 대한 로그가 기록되었습니다"

    @pytest.mark.asyncio
    async def test_api_request_logged(self, client, caplog):
        """API 요청은 상태코드와 처리 시간이 함께 기록되는지 검증"""
        with caplog.at_level(logging.INFO, logger="app.core.middleware"):
            await client.get("/api/me/favorites")

        records = [r for r in caplog.records if r.name == "app.core.middleware"]
        assert len(records) == 1
        assert records[0].status == 401
        assert records[0].path == "/api/me/favorites"
        assert records[0].elapsed_ms >= 0


# =============================================================================
# CacheControlMiddleware 테스트
# =============================================================================

class TestCacheControlMiddleware:
    """
    CacheControlMiddleware 통합 테스트

    Rationale:
        /api 경로에만 캐시 방지 헤더가 추가되는지 검증합니다.
        비-API 경로에는 영향이 없어야 합니다.
    """

    @pytest.mark.asyncio
    async def test_cache_control_on_api_path(self, client):
        """/api 경로 요청 시 Cache-Control 헤더가 올바르게 추가되는지 검증"""
        response = await client.get("/api/me/favorites")

        cache_control = response.headers.get("Cache-Control")
        # NOTE: 401이 반환되더라도 미들웨어는 동작해야 함
        assert cache_control is not None, "Cache-Control 헤더가 없습니다"
        assert "no-store" in cache_control
        assert "no-cache" in cache_control
        assert response.headers.get("Pragma") == "no-cache"
        assert response.headers.get("Expires") == "0"

    @pytest.mark.asyncio
    async def test_cache_control_not_on_non_api(self, client):
        """/ping 같은 비-API 경로에는 Cache-Control이 적용되지 않는지 검증"""
        response = await client.get("/ping")

        cache_control = response.headers.get("Cache-Control")
        if cache_control:
            assert "no-store" not in cache_control


# =============================================================================
# 미들웨어 체인 E2E 테스트
# =============================================================================

class TestMiddlewareChain:
    """
    전체 미들웨어 체인 통합(E2E) 테스트

    Rationale:
        TraceID → CacheControl 순서로 미들웨어가 협력하여
        에러 응답(envelope)에도 모든 헤더가 올바르게 설정되는지 검증합니다.
    """

    @pytest.mark.asyncio
    async def test_middleware_chain_all_headers(self, client):
        """모든 미들웨어가 협력하여 헤더가 올바르게 설정되는지 E2E 검증"""
        custom_trace = str(uuid.uuid4())
        response = await client.get(
            "/api/me/lists",
            headers={"X-Trace-ID": custom_trace},
        )

        assert response.status_code == 401
        assert response.json()["isSuccess"] is False

        # TraceIDMiddleware: 전달한 trace_id가 응답에 포함
        assert response.headers.get("X-Trace-ID") == custom_trace

        # CacheControlMiddleware: /api 경로이므로 캐시 방지 헤더 존재
        cache_control = response.headers.get("Cache-Control", "")
        assert "no-store" in cache_control
        assert response.headers.get("Pragma") == "no-cache"
