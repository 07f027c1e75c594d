"""테스트 공통 fixture"""

import base64
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from profileprism.core.limiter import limiter
from profileprism.domain.profile.analytics import AnalyticsLog
from profileprism.domain.profile.schemas import RepositorySummary, ResumeArtifact
from profileprism.main import app


@pytest.fixture(autouse=True)
def disable_rate_limit():
    """테스트 중 요청 제한 비활성화"""
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
def async_client():
    """비동기 HTTP 클라이언트"""
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.fixture
def analytics() -> AnalyticsLog:
    """이벤트 기록용 분석 로그"""
    return AnalyticsLog()


@pytest.fixture
def sample_user() -> dict:
    """테스트용 GitHub 사용자"""
    return {"login": "janedev", "name": "Jane Developer", "public_repos": 2}


@pytest.fixture
def sample_repos() -> list[RepositorySummary]:
    """테스트용 레포지토리 목록"""
    return [
        RepositorySummary(
            name="alpha",
            full_name="janedev/alpha",
            description="데이터 파이프라인",
            language="Python",
            stars=12,
            readme_text="# Alpha\n배치 처리 도구",
        ),
        RepositorySummary(
            name="beta",
            full_name="janedev/beta",
            description=None,
            language="TypeScript",
            stars=3,
            readme_text="No README available",
        ),
    ]


@pytest.fixture
def pdf_artifact() -> ResumeArtifact:
    """테스트용 PDF 이력서"""
    return ResumeArtifact(
        mime_type="application/pdf",
        content=base64.b64encode(b"%PDF-1.4 fake").decode(),
    )


@pytest.fixture
def github_repo_payload():
    """GitHub /user/repos 항목 생성 helper"""

    def _create(name: str, private: bool = False, archived: bool = False, **extra) -> dict:
        return {
            "name": name,
            "full_name": f"janedev/{name}",
            "private": private,
            "archived": archived,
            "description": extra.get("description"),
            "language": extra.get("language"),
            "stargazers_count": extra.get("stars", 0),
        }

    return _create


@pytest.fixture
def create_http_error():
    """HTTPStatusError 생성 helper"""

    def _create(status_code: int, message: str = "Error"):
        return httpx.HTTPStatusError(
            message,
            request=httpx.Request("GET", "https://api.github.com"),
            response=httpx.Response(status_code),
        )

    return _create


@pytest.fixture
def mock_generator_client():
    """프로필 생성용 LLM 클라이언트 mock"""
    with patch("profileprism.infra.llm.client.get_generator_client") as mock_get:
        mock_client = MagicMock()
        mock_client.get_model_name.return_value = "gpt-4o"
        mock_model = MagicMock()
        mock_model.ainvoke = AsyncMock()
        mock_client.get_chat_model.return_value = mock_model
        mock_get.return_value = mock_client
        yield mock_model


@pytest.fixture
def mock_workflow():
    """LangGraph 워크플로우 mock"""
    workflow = MagicMock()
    workflow.ainvoke = AsyncMock()
    return workflow
