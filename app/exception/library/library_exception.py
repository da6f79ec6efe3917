from app.exception.base_exception import BaseCustomException, ErrorCode


class ValidationError(BaseCustomException):
    """필수 입력값 누락/형식 오류 (빈 리스트 이름, 빈 stationId 등).

    Rationale (의도):
        - 클라이언트가 수정할 수 있는 오류이므로 400으로 매핑하고 재시도하지 않습니다.
    """
    def __init__(self, message: str = "입력값을 확인해주세요."):
        super().__init__(
            message=message,
            error_code=ErrorCode.VALIDATION_FAILED,
            status_code=400
        )


class NotFoundError(BaseCustomException):
    """리소스가 없거나 요청한 사용자의 소유가 아닌 경우.

    Rationale (의도):
        - "존재하지 않음"과 "다른 사용자의 리소스"를 구분하지 않고 동일하게 404로 응답하여
          다른 사용자 데이터의 존재 여부가 노출되지 않도록 합니다.
    """
    def __init__(self, message: str = "요청한 리소스를 찾을 수 없습니다."):
        super().__init__(
            message=message,
            error_code=ErrorCode.RESOURCE_NOT_FOUND,
            status_code=404
        )


class StoreError(BaseCustomException):
    """관계형 저장소 호출이 예기치 않게 실패한 경우 (연결 끊김, 예상 외 제약조건 위반 등)."""
    def __init__(self, message: str = "데이터 저장소 처리 중 오류가 발생했습니다."):
        super().__init__(
            message=message,
            error_code=ErrorCode.STORE_FAILED,
            status_code=500
        )
