"""
응답 envelope 수준의 코드 상수 정의

도메인 예외 코드는 app.exception.base_exception.ErrorCode(Enum)에서 관리하고,
이 모듈은 특정 예외 클래스에 속하지 않는 공통 코드(성공, 422, HTTPException 변환 등)만 담습니다.
"""

class ErrorCode:
    """envelope 공통 코드 상수 클래스"""

    # 공통 성공 코드
    COMMON_SUCCESS = "COMMON200"  # 모든 API 성공 응답에 사용

    # 공통 에러 코드
    INTERNAL_ERROR = "COMMON-001"    # 500 서버 내부 오류
    VALIDATION_ERROR = "VALIDATION-001"  # 422 요청 검증 실패
    FAVORITE_NOT_FOUND = "FAVORITE-404"  # 삭제 대상 즐겨찾기가 없음 (현재 목록을 result로 동봉)

    @staticmethod
    def http_error(status_code: int) -> str:
        """
        HTTP 상태 코드 기반 에러 코드 생성

        Args:
            status_code: HTTP 상태 코드 (예: 400, 404, 500)

        Returns:
            str: 에러 코드 (예: "HTTP_400", "HTTP_404")
        """
        return f"HTTP_{status_code}"
