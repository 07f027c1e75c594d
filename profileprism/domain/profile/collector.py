import asyncio

import httpx

from profileprism.core.config import settings
from profileprism.core.exceptions import AuthenticationError, FetchError
from profileprism.core.logging import get_logger
from profileprism.domain.profile.analytics import AnalyticsObserver, notify
from profileprism.domain.profile.constants import (
    README_CANONICAL_PATH,
    README_FALLBACK_PATH,
    README_FETCH_ERROR,
    README_NOT_AVAILABLE,
)
from profileprism.domain.profile.schemas import CollectedSources, RepositorySummary
from profileprism.infra.github.client import (
    get_authenticated_user,
    get_file_content,
    list_user_repos,
)

logger = get_logger(__name__)

_readme_semaphore = asyncio.Semaphore(settings.github_max_concurrent_requests)


def filter_repositories(
    repos: list[RepositorySummary],
    reserved_name: str | None = None,
) -> list[RepositorySummary]:
    """비공개, 아카이브, 예약된 이름의 레포지토리 제외

    Args:
        repos: 수집된 레포지토리 목록
        reserved_name: 제외할 레포지토리 이름, 대소문자 무시

    Returns:
        순서를 유지한 필터링 결과
    """
    reserved = (reserved_name or settings.github_reserved_repo_name).lower()
    return [
        repo
        for repo in repos
        if not repo.private and not repo.archived and repo.name.lower() != reserved
    ]


async def fetch_readme_text(repo: RepositorySummary, token: str | None = None) -> str:
    """README.md, 없으면 readme.md 조회

    실패해도 예외 대신 센티넬 문자열을 반환한다.

    Args:
        repo: 대상 레포지토리
        token: GitHub OAuth 토큰

    Returns:
        README 내용 또는 "No README available" / "Error fetching README"
    """
    try:
        content = await get_file_content(repo.full_name, README_CANONICAL_PATH, token)
        if content is None:
            content = await get_file_content(repo.full_name, README_FALLBACK_PATH, token)
    except Exception as e:
        logger.warning("README 조회 실패 repo=%s error=%s", repo.full_name, type(e).__name__)
        return README_FETCH_ERROR

    if content is None:
        return README_NOT_AVAILABLE
    return content


async def attach_readmes(
    repos: list[RepositorySummary], token: str | None = None
) -> list[RepositorySummary]:
    """레포지토리별 README를 동시에 조회해서 readme_text 채우기"""

    async def fetch_with_limit(repo: RepositorySummary) -> str:
        async with _readme_semaphore:
            return await fetch_readme_text(repo, token)

    readmes = await asyncio.gather(*[fetch_with_limit(repo) for repo in repos])

    return [
        repo.model_copy(update={"readme_text": readme})
        for repo, readme in zip(repos, readmes, strict=True)
    ]


async def collect_sources(
    token: str | None,
    analytics: AnalyticsObserver | None = None,
    reserved_name: str | None = None,
) -> CollectedSources:
    """GitHub 사용자 정보와 공개 레포지토리 목록 수집

    Args:
        token: GitHub OAuth 토큰
        analytics: 분석 이벤트 옵저버
        reserved_name: 제외할 레포지토리 이름

    Returns:
        사용자 정보와 README가 채워진 레포지토리 목록

    Raises:
        AuthenticationError: 토큰이 없거나 GitHub가 401을 반환한 경우
        FetchError: 그 밖의 GitHub 호출 실패
    """
    if not token:
        notify(analytics, "github_data_error", message="not authenticated")
        raise AuthenticationError(detail="no credential")

    try:
        user = await get_authenticated_user(token)
        notify(analytics, "github_user_fetched", user=user.get("login"))

        raw_repos = await list_user_repos(token)

    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        logger.error("GitHub API 오류 status=%d", status_code)
        notify(analytics, "github_data_error", message=f"HTTP {status_code}")
        if status_code == 401:
            raise AuthenticationError(detail="GitHub rejected the credential") from e
        raise FetchError(detail=f"GitHub API 오류: HTTP {status_code}") from e

    except httpx.RequestError as e:
        logger.error("GitHub 요청 실패 error=%s", type(e).__name__)
        notify(analytics, "github_data_error", message=type(e).__name__)
        raise FetchError(detail=f"GitHub 요청 실패: {type(e).__name__}") from e

    repos = filter_repositories(
        [RepositorySummary.from_github(r) for r in raw_repos],
        reserved_name,
    )
    repos = await attach_readmes(repos, token)

    logger.info("소스 수집 완료 total=%d filtered=%d", len(raw_repos), len(repos))
    notify(analytics, "github_data_fetched", repo_count=len(repos))
    return CollectedSources(user=user, repositories=repos)
