import contextvars
from typing import Optional

# 요청 단위 로깅 컨텍스트
# Rationale: 로깅 시 매번 request 객체를 전달하지 않고도 현재 요청의 Trace ID / 사용자를 식별하기 위해 사용합니다.
trace_id_context: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("trace_id", default=None)
user_id_context: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("user_id", default=None)


def get_trace_id() -> Optional[str]:
    """현재 컨텍스트의 Trace ID를 반환합니다."""
    return trace_id_context.get()


def set_trace_id(trace_id: str) -> None:
    trace_id_context.set(trace_id)


def get_user_id() -> Optional[str]:
    """인증이 끝난 요청이라면 현재 사용자 ID를, 아니면 None을 반환합니다."""
    return user_id_context.get()


def set_user_id(user_id: Optional[str]) -> None:
    user_id_context.set(user_id)
