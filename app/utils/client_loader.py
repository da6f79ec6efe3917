import httpx
import asyncio
import logging
from typing import Iterable
from app.exception.api.directory_exception import DirectoryError


logger = logging.getLogger("app")

async def load_client(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    retries: int = 0,
    backoff: float = 0.2,
    retry_on_status: Iterable[int] = (500, 502, 503, 504, 429),
    **kwargs,
) -> httpx.Response:
    """
    재사용 AsyncClient로 외부 요청을 보내고, 실패는 모두 DirectoryError로 변환.

    Note:
        기본값은 단발 호출(retries=0)입니다. 재시도가 필요한 호출자만 retries를 지정합니다.
    """
    for attempt in range(retries + 1):
        try:
            response = await client.request(method.upper(), url, **kwargs)
            # 일시 장애 가능성 있는 status는 짧게 재시도
            if response.status_code in retry_on_status and attempt < retries:
                await asyncio.sleep(backoff * (attempt + 1))
                continue
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            status = e.response.status_code if e.response is not None else None
            if status in retry_on_status and attempt < retries:
                await asyncio.sleep(backoff * (attempt + 1))
                continue
            logger.error({
                "status": status or 500,
                "errorCode": "DIRECTORY-001",
                "message": "외부 API가 오류 상태코드를 반환했습니다.",
                "url": url,
            })
            raise DirectoryError() from e
        except (httpx.TimeoutException, httpx.NetworkError) as e:
            # 네트워크/타임아웃류는 단기 재시도
            if attempt < retries:
                await asyncio.sleep(backoff * (attempt + 1))
                continue
            logger.error({
                "status": 503,
                "errorCode": "DIRECTORY-001",
                "message": f"외부 API 네트워크 오류: {e.__class__.__name__}",
                "url": url,
            })
            raise DirectoryError() from e
        except httpx.HTTPError as e:
            logger.error({
                "status": 503,
                "errorCode": "DIRECTORY-001",
                "message": f"외부 API 호출에 실패했습니다: {e}",
                "url": url,
            })
            raise DirectoryError() from e
    # retries < 0 처럼 루프가 한 번도 돌지 않은 경우
    raise DirectoryError()
