"""워크플로우 노드 함수 테스트"""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from profileprism.core.exceptions import AuthenticationError, PreconditionError, TransportError
from profileprism.domain.profile.schemas import CollectedSources, ProfileRequest
from profileprism.domain.profile.synthesizer import ProfileSynthesizer
from profileprism.domain.profile.workflow import (
    collect_sources_node,
    run_profile_workflow,
    score_node,
    synthesize_node,
)

WORKFLOW = "profileprism.domain.profile.workflow"


@pytest.fixture
def profile_request(pdf_artifact) -> ProfileRequest:
    return ProfileRequest(github_token="gho_test", artifacts=[pdf_artifact])


@pytest.fixture
def synthesizer() -> ProfileSynthesizer:
    extractor = MagicMock()
    extractor.extract = AsyncMock(return_value="resume text")
    generate = AsyncMock(return_value=json.dumps({"name": "Jane", "skills": ["Go"]}))
    return ProfileSynthesizer(extractor=extractor, generate=generate)


class TestCollectSourcesNode:
    """collect_sources_node 함수 테스트"""

    @pytest.mark.asyncio
    async def test_collects(self, profile_request, sample_user, sample_repos):
        """수집 결과를 상태에 저장"""
        sources = CollectedSources(user=sample_user, repositories=sample_repos)
        with patch(f"{WORKFLOW}.collect_sources", new_callable=AsyncMock, return_value=sources):
            result = await collect_sources_node({"request": profile_request})

        assert result["sources"] == sources
        assert result["request"] is profile_request


class TestSynthesizeNode:
    """synthesize_node 함수 테스트"""

    @pytest.mark.asyncio
    async def test_synthesizes(self, profile_request, synthesizer, sample_user, sample_repos):
        """프로필과 소스 스냅샷을 상태에 저장"""
        state = {
            "request": profile_request,
            "session_id": "s-1",
            "sources": CollectedSources(user=sample_user, repositories=sample_repos),
        }

        result = await synthesize_node(state, synthesizer)

        assert result["profile"] == {"name": "Jane", "skills": ["Go"]}
        assert result["source_context"] is synthesizer.source_context
        assert synthesizer._generate.call_args.args[1] == "s-1"


class TestScoreNode:
    """score_node 함수 테스트"""

    @pytest.mark.asyncio
    async def test_scores(self):
        """프로필 완성도 계산"""
        result = await score_node({"profile": {"skills": ["Go"]}})
        assert result["completion_score"] == 17


class TestRunProfileWorkflow:
    """run_profile_workflow 함수 테스트"""

    @pytest.mark.asyncio
    async def test_end_to_end(self, profile_request, synthesizer, sample_user, sample_repos, analytics):
        """수집, 생성, 점수 계산 순서로 실행"""
        sources = CollectedSources(user=sample_user, repositories=sample_repos)
        with patch(
            f"{WORKFLOW}.collect_sources", new_callable=AsyncMock, return_value=sources
        ) as mock_collect:
            state = await run_profile_workflow(
                profile_request, synthesizer, analytics=analytics, session_id="s-1"
            )

        mock_collect.assert_called_once_with("gho_test", analytics)
        assert state["profile"]["name"] == "Jane"
        assert state["completion_score"] == 17
        assert state["source_context"].resume_texts == ("resume text",)

    @pytest.mark.asyncio
    async def test_collect_error_propagates(self, profile_request, synthesizer):
        """수집 실패는 생성 호출 없이 전파"""
        with patch(
            f"{WORKFLOW}.collect_sources",
            new_callable=AsyncMock,
            side_effect=AuthenticationError(detail="no credential"),
        ):
            with pytest.raises(AuthenticationError):
                await run_profile_workflow(profile_request, synthesizer)

        synthesizer._generate.assert_not_called()

    @pytest.mark.asyncio
    async def test_no_repositories(self, profile_request, synthesizer, sample_user):
        """공개 레포지토리가 없으면 PreconditionError"""
        sources = CollectedSources(user=sample_user, repositories=[])
        with patch(f"{WORKFLOW}.collect_sources", new_callable=AsyncMock, return_value=sources):
            with pytest.raises(PreconditionError):
                await run_profile_workflow(profile_request, synthesizer)

    @pytest.mark.asyncio
    async def test_timeout(self, profile_request, synthesizer, mock_workflow):
        """전체 타임아웃을 넘으면 TransportError"""

        async def slow(_state):
            await asyncio.sleep(1)

        mock_workflow.ainvoke.side_effect = slow
        with (
            patch(f"{WORKFLOW}.create_profile_workflow", return_value=mock_workflow),
            patch(f"{WORKFLOW}.settings") as mock_settings,
        ):
            mock_settings.workflow_timeout = 0.01

            with pytest.raises(TransportError):
                await run_profile_workflow(profile_request, synthesizer)
