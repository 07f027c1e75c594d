import asyncio
import json
from collections.abc import Awaitable, Callable

from pydantic import TypeAdapter, ValidationError

from profileprism.core.config import settings
from profileprism.core.exceptions import CustomException, ExtractionError, PreconditionError
from profileprism.core.logging import get_logger
from profileprism.domain.profile.analytics import AnalyticsObserver, notify
from profileprism.domain.profile.constants import RESUME_TEXT_SEPARATOR
from profileprism.domain.profile.extractor import DocumentTextExtractor
from profileprism.domain.profile.prompts import (
    PROFILE_GENERATOR_PROMPT,
    PROFILE_OUTPUT_SCHEMA,
    PROFILE_WRITING_RULES,
)
from profileprism.domain.profile.schemas import (
    GeneratedProfile,
    RepositorySummary,
    ResumeArtifact,
    SourceContext,
)
from profileprism.domain.profile.scoring import compute_completion_score
from profileprism.infra.llm.client import generate_profile_text

logger = get_logger(__name__)

GenerateFn = Callable[[str, str | None], Awaitable[str]]

_profile_adapter = TypeAdapter(GeneratedProfile)


def select_top_repositories(
    repos: list[RepositorySummary], limit: int | None = None
) -> list[RepositorySummary]:
    """수집 순서 기준 상위 레포지토리 선택"""
    return list(repos[: limit if limit is not None else settings.profile_max_repositories])


def format_repositories(repos: list[RepositorySummary] | tuple[RepositorySummary, ...]) -> str:
    """레포지토리 목록을 프롬프트용 JSON으로 포맷"""
    max_length = settings.readme_max_length_prompt
    payload = [
        {
            "name": repo.name,
            "description": repo.description,
            "language": repo.language,
            "stars": repo.stars,
            "readme": repo.readme_text[:max_length] if repo.readme_text else repo.readme_text,
        }
        for repo in repos
    ]
    return json.dumps(payload, indent=2, ensure_ascii=False)


def render_profile_prompt(context: SourceContext) -> str:
    """소스 스냅샷으로 프롬프트 생성, 같은 입력이면 항상 같은 결과"""
    return PROFILE_GENERATOR_PROMPT.format(
        user_json=json.dumps(context.user, indent=2, ensure_ascii=False),
        repositories_json=format_repositories(context.top_repositories),
        resume_text=RESUME_TEXT_SEPARATOR.join(context.resume_texts),
        writing_rules=PROFILE_WRITING_RULES,
        output_schema=PROFILE_OUTPUT_SCHEMA,
    )


def extract_profile_json(text: str) -> dict:
    """응답 텍스트에서 첫 '{'부터 마지막 '}'까지를 JSON 객체로 파싱

    Raises:
        ExtractionError: 경계를 찾지 못했거나 JSON 파싱에 실패한 경우
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        logger.warning("응답에 JSON 경계 없음 length=%d", len(text))
        raise ExtractionError()

    try:
        return json.loads(text[start : end + 1])
    except (ValueError, RecursionError) as e:
        logger.warning("응답 JSON 파싱 실패 error=%s", e)
        raise ExtractionError() from e


def validate_profile_shape(data: dict) -> list[str]:
    """스키마와 다른 필드 목록 반환, 예외는 던지지 않음"""
    try:
        _profile_adapter.validate_python(data)
    except ValidationError as e:
        return [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        ]
    return []


class ProfileSynthesizer:
    """수집된 소스로 프롬프트를 만들고 LLM 응답을 프로필로 변환

    current_profile은 파싱에 성공했을 때만 교체되고, source_context는 생성 호출
    전에 저장되어 실패 후에도 남는다.
    """

    def __init__(
        self,
        extractor: DocumentTextExtractor | None = None,
        analytics: AnalyticsObserver | None = None,
        generate: GenerateFn | None = None,
    ):
        self._analytics = analytics
        self._extractor = extractor or DocumentTextExtractor(analytics=analytics)
        self._generate = generate
        self._lock = asyncio.Lock()
        self.current_profile: GeneratedProfile | None = None
        self.source_context: SourceContext | None = None

    @property
    def completion_score(self) -> int:
        return compute_completion_score(self.current_profile)

    async def _extract_all(self, artifacts: list[ResumeArtifact]) -> list[str]:
        semaphore = asyncio.Semaphore(settings.extraction_max_concurrency)

        async def extract_with_limit(artifact: ResumeArtifact) -> str:
            async with semaphore:
                return await self._extractor.extract(artifact)

        return list(await asyncio.gather(*[extract_with_limit(a) for a in artifacts]))

    async def synthesize(
        self,
        user: dict,
        repositories: list[RepositorySummary],
        artifacts: list[ResumeArtifact],
        session_id: str | None = None,
    ) -> GeneratedProfile:
        """프로필 생성

        Args:
            user: GitHub 사용자 정보
            repositories: 수집 순서대로 정렬된 레포지토리
            artifacts: 이력서 파일 목록
            session_id: Langfuse 세션 ID

        Returns:
            파싱된 프로필 JSON 객체

        Raises:
            PreconditionError: 레포지토리 또는 이력서 파일이 없는 경우
            GenerationError: 생성 서비스가 요청을 거부한 경우
            TransportError: 생성 서비스에 연결할 수 없는 경우
            ExtractionError: 응답에서 JSON을 추출하지 못한 경우
        """
        if not repositories or not artifacts:
            logger.warning(
                "소스 데이터 없음 repos=%d artifacts=%d", len(repositories), len(artifacts)
            )
            raise PreconditionError()

        async with self._lock:
            top_repos = select_top_repositories(repositories)
            resume_texts = await self._extract_all(artifacts)

            self.source_context = SourceContext(
                user=user,
                top_repositories=tuple(top_repos),
                resume_texts=tuple(resume_texts),
            )
            prompt = render_profile_prompt(self.source_context)

            generate = self._generate or generate_profile_text
            notify(self._analytics, "profile_generation_started", repo_count=len(top_repos))
            try:
                response_text = await generate(prompt, session_id)
                notify(
                    self._analytics,
                    "profile_generation_response_received",
                    length=len(response_text),
                )
                profile = extract_profile_json(response_text)
            except CustomException as e:
                notify(self._analytics, "profile_generation_error", message=e.message)
                raise

            problems = validate_profile_shape(profile)
            if problems:
                logger.warning("프로필 스키마 불일치 count=%d fields=%s", len(problems), problems)

            self.current_profile = profile
            notify(self._analytics, "profile_data_parsed", fields=list(profile.keys()))
            logger.info(
                "프로필 생성 완료 repos=%d artifacts=%d score=%d",
                len(top_repos),
                len(artifacts),
                self.completion_score,
            )
            return profile
