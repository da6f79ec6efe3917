from app.exception.base_exception import BaseCustomException, ErrorCode

class RateLimitException(BaseCustomException):
    """라이브 스테이션 검색 요청이 분당 허용 횟수를 초과한 경우"""
    error_code = ErrorCode.RATE_LIMIT_EXCEEDED
    message = "요청 횟수가 초과되었습니다. 잠시 후 다시 시도해주세요."
    status_code = 429
