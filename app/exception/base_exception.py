from enum import Enum

class ErrorCode(str, Enum):
    """
    애플리케이션 전반에서 사용하는 에러 코드 정의.
    형식: 카테고리(영문)-번호(3자리)
    """
    # 1. COMMON: 공통/일반 에러
    GENERIC_UNKNOWN = "GENERIC-000"
    COMMON_BAD_REQUEST = "COMMON-002"
    RATE_LIMIT_EXCEEDED = "RATE-001"

    # 2. AUTH: 인증 관련
    AUTH_MISSING_TOKEN = "AUTH-001"
    AUTH_INVALID_TOKEN = "AUTH-002"
    AUTH_EXPIRED_TOKEN = "AUTH-003"

    # 3. LIBRARY: 즐겨찾기 / 스테이션 리스트
    VALIDATION_FAILED = "LIBRARY-001"
    RESOURCE_NOT_FOUND = "LIBRARY-002"
    STORE_FAILED = "LIBRARY-003"

    # 4. DIRECTORY: 외부 스테이션 디렉토리(Radio-Browser) 호출
    DIRECTORY_REQUEST_FAILED = "DIRECTORY-001"
    DIRECTORY_INVALID_RESPONSE = "DIRECTORY-002"


class BaseCustomException(Exception):
    """
    모든 커스텀 예외의 최상위 클래스.
    이 클래스를 상속받아 구체적인 예외를 정의해야 함.
    """
    error_code: ErrorCode = ErrorCode.GENERIC_UNKNOWN
    message: str = "알 수 없는 오류가 발생했습니다."
    status_code: int = 500

    def __init__(self, message: str = None, error_code: ErrorCode = None, status_code: int = None):
        if message:
            self.message = message
        if error_code:
            self.error_code = error_code
        if status_code:
            self.status_code = status_code
        super().__init__(self.message)
