import logging
from typing import List, Optional

import httpx

from app.core.config import RADIO_BROWSER_BASE_URL
from app.directory.base import BaseStationDirectory, StationRecord
from app.exception.api.directory_exception import DirectoryError
from app.exception.base_exception import ErrorCode
from app.utils.client_loader import load_client

logger = logging.getLogger("app")

# 고장난 스트림은 제외하고 클릭 수 내림차순 정렬
DEFAULT_SEARCH_PARAMS = {
    "hidebroken": "true",
    "order": "clickcount",
    "reverse": "true",
}


class RadioBrowserClient(BaseStationDirectory):
    """Radio-Browser(https://www.radio-browser.info) `/stations/search` 클라이언트.

    Attributes:
        client: 애플리케이션 수명 동안 재사용하는 httpx.AsyncClient
        base_url: JSON API 베이스 URL (예: https://de1.api.radio-browser.info/json)
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str = RADIO_BROWSER_BASE_URL):
        self.client = client
        self.base_url = base_url.rstrip("/")

    def build_params(self, limit: int, name: Optional[str] = None, tag: Optional[str] = None) -> dict:
        params = {"limit": limit, **DEFAULT_SEARCH_PARAMS}
        if name:
            params["name"] = name
        if tag:
            params["tag"] = tag
        return params

    async def search(self, limit: int, name: Optional[str] = None, tag: Optional[str] = None) -> List[StationRecord]:
        params = self.build_params(limit, name, tag)
        response = await load_client(
            self.client,
            "GET",
            f"{self.base_url}/stations/search",
            params=params,
        )

        try:
            stations = response.json()
        except ValueError as e:
            logger.error(f"Radio-Browser returned non-JSON body (params: {params}): {e}")
            raise DirectoryError(
                "스테이션 디렉토리 응답을 해석할 수 없습니다.",
                error_code=ErrorCode.DIRECTORY_INVALID_RESPONSE,
            ) from e

        if not isinstance(stations, list):
            logger.error(f"Radio-Browser returned unexpected payload type {type(stations).__name__} (params: {params})")
            raise DirectoryError(
                "스테이션 디렉토리 응답 형식이 올바르지 않습니다.",
                error_code=ErrorCode.DIRECTORY_INVALID_RESPONSE,
            )

        return stations
