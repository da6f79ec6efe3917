from app.exception.base_exception import BaseCustomException, ErrorCode


class AuthError(BaseCustomException):
    """Bearer 토큰 누락/위조/만료 시 발생하는 인증 예외 (401)"""
    error_code = ErrorCode.AUTH_INVALID_TOKEN
    message = "인증 정보가 유효하지 않습니다."
    status_code = 401
