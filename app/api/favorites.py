from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from typing import List

from app.api.dependencies import get_current_user, get_favorite_service
from app.core.error_codes import ErrorCode
from app.core.response import ApiResponse, error_response, success_response
from app.models.dto import AuthenticatedUser, FavoriteCreateRequest
from app.services.favorite_service import FavoriteService

router = APIRouter(
    prefix="/api/me/favorites",
    tags=["Favorites"],
    responses={401: {"description": "Unauthorized"}},
)


@router.get("", status_code=status.HTTP_200_OK, response_model=ApiResponse[List[str]])
def get_favorites(
    user: AuthenticatedUser = Depends(get_current_user),
    service: FavoriteService = Depends(get_favorite_service),
):
    """
    즐겨찾기 목록 조회

    Returns:
        200 OK: result = [stationuuid, ...]
    """
    return success_response(service.list_favorites(user.user_id))


@router.post("", status_code=status.HTTP_200_OK, response_model=ApiResponse[List[str]])
def add_favorite(
    body: FavoriteCreateRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: FavoriteService = Depends(get_favorite_service),
):
    """
    즐겨찾기 추가

    - **stationId**: Radio-Browser stationuuid (Body)

    Returns:
        200 OK: 신규 추가 또는 이미 존재 (멱등성). result = 갱신된 전체 목록
        400: stationId 누락/빈 값
    """
    return success_response(service.add_favorite(user.user_id, body.stationId))


@router.delete("/{station_id}", status_code=status.HTTP_200_OK, response_model=ApiResponse[List[str]])
def delete_favorite(
    station_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: FavoriteService = Depends(get_favorite_service),
):
    """
    즐겨찾기 삭제

    Returns:
        200 OK: 삭제 성공. result = 갱신된 전체 목록
        404: 즐겨찾기에 없던 스테이션. result = 현재 전체 목록 (클라이언트 동기화용)
    """
    outcome = service.remove_favorite(user.user_id, station_id)
    if not outcome.removed:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=error_response(
                message="즐겨찾기에 없는 스테이션입니다.",
                code=ErrorCode.FAVORITE_NOT_FOUND,
                result=outcome.favorites,
            ).model_dump(mode="json"),
        )
    return success_response(outcome.favorites)
