import asyncio

from langgraph.graph import END, StateGraph
from langgraph.graph.state import CompiledStateGraph

from profileprism.core.config import settings
from profileprism.core.exceptions import TransportError
from profileprism.core.logging import get_logger
from profileprism.domain.profile.analytics import AnalyticsObserver
from profileprism.domain.profile.collector import collect_sources
from profileprism.domain.profile.schemas import ProfileRequest, ProfileState
from profileprism.domain.profile.scoring import compute_completion_score
from profileprism.domain.profile.synthesizer import ProfileSynthesizer

logger = get_logger(__name__)


async def collect_sources_node(
    state: ProfileState, analytics: AnalyticsObserver | None = None
) -> ProfileState:
    """소스 수집 노드: GitHub 사용자 정보와 레포지토리 수집"""
    request = state["request"]
    logger.info("collect_sources_node 시작 artifacts=%d", len(request.artifacts))

    sources = await collect_sources(request.github_token, analytics)

    logger.info("collect_sources_node 완료 repos=%d", len(sources.repositories))
    return {**state, "sources": sources}


async def synthesize_node(state: ProfileState, synthesizer: ProfileSynthesizer) -> ProfileState:
    """프로필 생성 노드: 이력서 텍스트 추출 후 LLM 호출"""
    logger.info("synthesize_node 시작")

    sources = state["sources"]
    profile = await synthesizer.synthesize(
        user=sources.user,
        repositories=sources.repositories,
        artifacts=state["request"].artifacts,
        session_id=state.get("session_id"),
    )

    logger.info("synthesize_node 완료 fields=%d", len(profile))
    return {**state, "profile": profile, "source_context": synthesizer.source_context}


async def score_node(state: ProfileState) -> ProfileState:
    """완성도 점수 노드"""
    score = compute_completion_score(state.get("profile"))
    logger.info("score_node 완료 score=%d", score)
    return {**state, "completion_score": score}


def create_profile_workflow(
    synthesizer: ProfileSynthesizer,
    analytics: AnalyticsObserver | None = None,
) -> CompiledStateGraph:
    """프로필 생성 워크플로우 생성: collect -> synthesize -> score"""

    async def collect(state: ProfileState) -> ProfileState:
        return await collect_sources_node(state, analytics)

    async def synthesize(state: ProfileState) -> ProfileState:
        return await synthesize_node(state, synthesizer)

    workflow = StateGraph(ProfileState)

    workflow.add_node("collect_sources", collect)
    workflow.add_node("synthesize", synthesize)
    workflow.add_node("score", score_node)

    workflow.set_entry_point("collect_sources")
    workflow.add_edge("collect_sources", "synthesize")
    workflow.add_edge("synthesize", "score")
    workflow.add_edge("score", END)

    return workflow.compile()


async def run_profile_workflow(
    request: ProfileRequest,
    synthesizer: ProfileSynthesizer,
    analytics: AnalyticsObserver | None = None,
    session_id: str | None = None,
) -> ProfileState:
    """워크플로우 실행, 전체 타임아웃 적용

    Raises:
        TransportError: workflow_timeout 초과
        CustomException: 각 노드에서 발생한 파이프라인 오류
    """
    workflow = create_profile_workflow(synthesizer, analytics)
    initial_state: ProfileState = {"request": request, "session_id": session_id}

    try:
        return await asyncio.wait_for(
            workflow.ainvoke(initial_state), timeout=settings.workflow_timeout
        )
    except asyncio.TimeoutError as e:
        logger.error("워크플로우 타임아웃 timeout=%.1f", settings.workflow_timeout)
        raise TransportError(detail="profile generation timed out") from e
