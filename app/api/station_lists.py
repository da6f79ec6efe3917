from fastapi import APIRouter, Depends, status
from typing import List

from app.api.dependencies import get_current_user, get_station_list_service
from app.core.response import ApiResponse, success_response
from app.exception.library.library_exception import NotFoundError
from app.models.dto import (
    AuthenticatedUser,
    StationListAddStationRequest,
    StationListDeleteResult,
    StationListNameRequest,
    StationListView,
)
from app.services.station_list_service import StationListService

router = APIRouter(
    prefix="/api/me/lists",
    tags=["Station Lists"],
    responses={401: {"description": "Unauthorized"}, 404: {"description": "Not found"}},
)

LIST_NOT_FOUND_MESSAGE = "스테이션 리스트를 찾을 수 없습니다."


def _found(station_list: StationListView | None) -> StationListView:
    # 존재하지 않는 리스트와 다른 사용자의 리스트는 같은 404로 응답
    if station_list is None:
        raise NotFoundError(LIST_NOT_FOUND_MESSAGE)
    return station_list


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ApiResponse[StationListView])
def create_station_list(
    body: StationListNameRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: StationListService = Depends(get_station_list_service),
):
    """
    리스트 생성

    Returns:
        201 Created: result = {id, name, createdAt, stationIds: []}
        400: name 누락/공백
    """
    return success_response(service.create_list(user.user_id, body.name), message="생성되었습니다.")


@router.get("", status_code=status.HTTP_200_OK, response_model=ApiResponse[List[StationListView]])
def get_station_lists(
    user: AuthenticatedUser = Depends(get_current_user),
    service: StationListService = Depends(get_station_list_service),
):
    """내 리스트 전체 조회 (최신 생성 순, 멤버 포함)"""
    return success_response(service.list_all(user.user_id))


@router.get("/{list_id}", status_code=status.HTTP_200_OK, response_model=ApiResponse[StationListView])
def get_station_list(
    list_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: StationListService = Depends(get_station_list_service),
):
    return success_response(_found(service.get_detail(user.user_id, list_id)))


@router.put("/{list_id}", status_code=status.HTTP_200_OK, response_model=ApiResponse[StationListView])
def rename_station_list(
    list_id: int,
    body: StationListNameRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: StationListService = Depends(get_station_list_service),
):
    """리스트 이름 변경 (이름 외의 필드는 변경 불가)"""
    return success_response(_found(service.rename(user.user_id, list_id, body.name)))


@router.delete("/{list_id}", status_code=status.HTTP_200_OK, response_model=ApiResponse[StationListDeleteResult])
def delete_station_list(
    list_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: StationListService = Depends(get_station_list_service),
):
    """
    리스트 삭제 (멤버도 함께 삭제)

    Returns:
        200 OK: result = {"id": list_id, "deleted": true}
        404: 없거나 내 리스트가 아님
    """
    if not service.delete(user.user_id, list_id):
        raise NotFoundError(LIST_NOT_FOUND_MESSAGE)
    return success_response(StationListDeleteResult(id=list_id, deleted=True))


# --- Managing Stations within a List ---

@router.post("/{list_id}/stations", status_code=status.HTTP_200_OK, response_model=ApiResponse[StationListView])
def add_station_to_list(
    list_id: int,
    body: StationListAddStationRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: StationListService = Depends(get_station_list_service),
):
    """리스트에 스테이션 추가 (이미 있으면 변경 없이 현재 리스트 반환)"""
    return success_response(_found(service.add_station(user.user_id, list_id, body.stationId)))


@router.delete(
    "/{list_id}/stations/{station_id}",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[StationListView],
)
def remove_station_from_list(
    list_id: int,
    station_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: StationListService = Depends(get_station_list_service),
):
    """
    리스트에서 스테이션 삭제

    Returns:
        200 OK: result = 삭제 후 리스트. 원래 없던 스테이션이면 message로 구분
        404: 리스트가 없거나 내 리스트가 아님
    """
    outcome = service.remove_station(user.user_id, list_id, station_id)
    station_list = _found(outcome.station_list)
    message = "성공입니다." if outcome.removed else "리스트에 없는 스테이션입니다."
    return success_response(station_list, message=message)
