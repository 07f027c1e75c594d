import base64

import httpx

from profileprism.core.config import settings
from profileprism.core.logging import get_logger

logger = get_logger(__name__)

GITHUB_API_BASE = "https://api.github.com"
NEXT_PAGE_MARKER = 'rel="next"'

_client = httpx.AsyncClient(timeout=settings.github_timeout)


def _get_headers(token: str | None = None) -> dict[str, str]:
    """GitHub API 요청 헤더 생성

    Args:
        token: GitHub OAuth 토큰

    Returns:
        HTTP 헤더 딕셔너리
    """
    headers = {"Accept": "application/vnd.github.v3+json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


async def close_client():
    """httpx 클라이언트 종료"""
    await _client.aclose()


def _has_next_page(response: httpx.Response) -> bool:
    """Link 헤더에 다음 페이지가 있는지 확인"""
    link = response.headers.get("Link")
    return bool(link) and NEXT_PAGE_MARKER in link


async def get_authenticated_user(token: str) -> dict:
    """인증된 사용자 정보 조회

    Args:
        token: GitHub OAuth 토큰

    Returns:
        GitHub /user 응답 딕셔너리
    """
    response = await _client.get(f"{GITHUB_API_BASE}/user", headers=_get_headers(token))
    response.raise_for_status()
    data = response.json()

    logger.info("사용자 조회 완료 login=%s", data.get("login"))
    return data


async def list_user_repos(token: str, per_page: int | None = None) -> list[dict]:
    """사용자 레포지토리 전체 목록 조회

    Link 헤더에 rel="next"가 없을 때까지 페이지를 순서대로 요청한다.

    Args:
        token: GitHub OAuth 토큰
        per_page: 페이지 크기, 최대 100

    Returns:
        모든 페이지를 응답 순서대로 이어붙인 레포지토리 목록
    """
    url = f"{GITHUB_API_BASE}/user/repos"
    page_size = min(per_page or settings.github_page_size, 100)

    repos: list[dict] = []
    page = 1
    while True:
        params = {
            "sort": "updated",
            "direction": "desc",
            "per_page": page_size,
            "page": page,
        }
        response = await _client.get(url, headers=_get_headers(token), params=params)
        response.raise_for_status()
        repos.extend(response.json())

        if not _has_next_page(response):
            break
        page += 1

    logger.info("레포 목록 조회 완료 pages=%d count=%d", page, len(repos))
    return repos


async def get_file_content(full_name: str, path: str, token: str | None = None) -> str | None:
    """레포지토리 파일 내용 조회

    Args:
        full_name: owner/repo 형식의 레포지토리 이름
        path: 파일 경로
        token: GitHub OAuth 토큰

    Returns:
        디코딩된 파일 내용, 404면 None

    Raises:
        httpx.HTTPStatusError: 404 이외의 HTTP 오류
        httpx.RequestError: 네트워크 오류
    """
    url = f"{GITHUB_API_BASE}/repos/{full_name}/contents/{path}"

    try:
        response = await _client.get(url, headers=_get_headers(token))
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        if e.response.status_code == 404:
            logger.info("파일 없음 repo=%s path=%s", full_name, path)
            return None
        raise

    data = response.json()
    encoded = data.get("content") or ""
    content = base64.b64decode(encoded).decode("utf-8", errors="replace")

    logger.info("파일 조회 완료 repo=%s path=%s", full_name, path)
    return content
