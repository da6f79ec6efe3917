from app.exception.base_exception import BaseCustomException, ErrorCode


class DirectoryError(BaseCustomException):
    """외부 스테이션 디렉토리(Radio-Browser) 호출 실패 (네트워크/상태코드/타임아웃/응답 형식 등).

    Note:
        캐시 계층은 이 예외가 발생해도 이전 값을 대신 반환하지 않습니다.
    """
    error_code = ErrorCode.DIRECTORY_REQUEST_FAILED
    message = "스테이션 디렉토리 호출에 실패했습니다."
    status_code = 500
