import uuid

from fastapi import APIRouter

from profileprism.api.v1.schemas import GenerateRequest, GenerateResponse
from profileprism.core.context import set_session_id
from profileprism.core.exceptions import CustomException
from profileprism.core.logging import get_logger
from profileprism.domain.profile.analytics import AnalyticsLog
from profileprism.domain.profile.extractor import select_supported_artifacts
from profileprism.domain.profile.presenter import build_audit_snapshot, build_profile_view
from profileprism.domain.profile.schemas import ProfileRequest, ResumeArtifact
from profileprism.domain.profile.synthesizer import ProfileSynthesizer
from profileprism.domain.profile.workflow import run_profile_workflow

router = APIRouter(prefix="/profile", tags=["profile"])
logger = get_logger(__name__)


@router.post("/generate", response_model=GenerateResponse)
async def generate_profile(body: GenerateRequest) -> GenerateResponse:
    """GitHub 활동과 이력서로 프로필 생성

    실패 응답에도 생성 직전까지 수집된 sourceContext가 포함된다.
    """
    session_id = str(uuid.uuid4())
    set_session_id(session_id)
    analytics = AnalyticsLog()

    artifacts = select_supported_artifacts(
        [ResumeArtifact(mime_type=a.mime_type, content=a.content) for a in body.artifacts],
        analytics,
    )
    profile_request = ProfileRequest(github_token=body.github_token, artifacts=artifacts)
    synthesizer = ProfileSynthesizer(analytics=analytics)

    logger.info("프로필 생성 요청 session_id=%s artifacts=%d", session_id, len(artifacts))

    try:
        state = await run_profile_workflow(
            request=profile_request,
            synthesizer=synthesizer,
            analytics=analytics,
            session_id=session_id,
        )
    except CustomException as e:
        snapshot = build_audit_snapshot(synthesizer.source_context)
        if snapshot is not None:
            e.extra = {"sourceContext": snapshot}
        logger.warning(
            "프로필 생성 실패 session_id=%s error_code=%s events=%d",
            session_id,
            e.error_code,
            len(analytics.events),
        )
        raise

    completion_score = state["completion_score"]
    logger.info(
        "프로필 생성 응답 session_id=%s score=%d events=%d",
        session_id,
        completion_score,
        len(analytics.events),
    )
    return GenerateResponse(
        profile=build_profile_view(state["profile"], completion_score),
        completion_score=completion_score,
        source_context=build_audit_snapshot(state.get("source_context")),
    )
