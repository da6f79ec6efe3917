"""
Identity Verifier

Bearer 토큰(HS256 JWT)을 검증하여 {user_id, email}을 반환하거나 AuthError를 발생시킵니다.
토큰 발급(create_access_token)은 개발/테스트용 헬퍼이며, 회원가입/로그인/비밀번호 해시는 이 서비스 범위 밖입니다.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from app.core.config import JWT_ALGORITHM, JWT_EXPIRES_MINUTES, JWT_SECRET
from app.exception.auth.auth_exception import AuthError
from app.exception.base_exception import ErrorCode
from app.models.dto import AuthenticatedUser


def create_access_token(
    user_id: str,
    email: Optional[str] = None,
    expires_minutes: int = JWT_EXPIRES_MINUTES,
    secret: str = JWT_SECRET,
) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "iat": now,
        "exp": now + timedelta(minutes=expires_minutes),
    }
    if email:
        payload["email"] = email
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def verify_token(token: str, secret: str = JWT_SECRET) -> AuthenticatedUser:
    """
    Raises:
        AuthError: 토큰이 없거나, 서명이 틀리거나, 만료되었거나, 사용자 식별값(sub/id)이 없는 경우
    """
    if not token:
        raise AuthError("인증 토큰이 필요합니다.", error_code=ErrorCode.AUTH_MISSING_TOKEN)

    try:
        payload = jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthError("인증 토큰이 만료되었습니다.", error_code=ErrorCode.AUTH_EXPIRED_TOKEN)
    except jwt.InvalidTokenError:
        raise AuthError("유효하지 않은 인증 토큰입니다.")

    # 이전 버전 토큰은 사용자 식별값을 `id` 클레임에 담음
    user_id = payload.get("sub") or payload.get("id")
    if not user_id:
        raise AuthError("인증 토큰에 사용자 정보가 없습니다.")

    return AuthenticatedUser(user_id=str(user_id), email=payload.get("email"))
