"""
Rate Limiter 모듈
순환 임포트를 피하기 위해 limiter를 중앙 집중화

외부 디렉토리(Radio-Browser)로 나가는 라이브 검색 라우트에만 적용합니다.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from app.core.config import RATE_LIMIT_PER_MINUTE

LIVE_SEARCH_RATE_LIMIT = f"{RATE_LIMIT_PER_MINUTE}/minute"

# 사용자의 IP 주소를 기준으로 제한
limiter = Limiter(key_func=get_remote_address)
