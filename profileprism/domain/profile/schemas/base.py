import copy
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from typing_extensions import TypedDict

from profileprism.domain.profile.schemas.github import CollectedSources, RepositorySummary


class ResumeArtifact(BaseModel):
    """업로드된 이력서 파일

    content는 원본 바이트, base64 문자열, data URL 중 하나
    """

    mime_type: str
    content: bytes | str


class SourceContext(BaseModel):
    """한 번의 생성 시도에 사용된 입력 스냅샷 - 감사용"""

    model_config = ConfigDict(frozen=True)

    user: dict[str, Any]
    top_repositories: tuple[RepositorySummary, ...]
    resume_texts: tuple[str, ...]

    @field_validator("user", mode="after")
    @classmethod
    def copy_user(cls, value: dict[str, Any]) -> dict[str, Any]:
        """호출자 딕셔너리와 분리된 사본 보관"""
        return copy.deepcopy(value)

    def to_audit_dict(self) -> dict:
        """응답에 포함할 JSON 호환 딕셔너리"""
        return {
            "githubUser": copy.deepcopy(self.user),
            "githubRepos": [
                {
                    "name": repo.name,
                    "description": repo.description,
                    "language": repo.language,
                    "stars": repo.stars,
                    "readme": repo.readme_text,
                }
                for repo in self.top_repositories
            ],
            "resumeTexts": list(self.resume_texts),
        }


class ExperienceEntry(TypedDict, total=False):
    position: str
    company: str
    period: str
    description: str


class EducationEntry(TypedDict, total=False):
    degree: str
    institution: str
    period: str


class ProjectEntry(TypedDict, total=False):
    name: str
    description: str
    technologies: list[str]


class GeneratedProfile(TypedDict, total=False):
    """LLM이 생성한 프로필 - 파싱된 JSON 객체를 그대로 보관"""

    name: str
    title: str
    summary: str
    skills: list[str]
    experience: list[ExperienceEntry]
    education: list[EducationEntry]
    projects: list[ProjectEntry]
    interests: list[str]
    recommendations: list[str]
    targetSalary: str
    newProjects: list[str]
    newGoals: list[str]
    newIdeas: list[str]
    newRoles: list[str]
    newLifePaths: list[str]


class ProfileRequest(BaseModel):
    """프로필 생성 요청"""

    github_token: str | None = None
    artifacts: list[ResumeArtifact]


class ProfileState(TypedDict, total=False):
    """LangGraph 워크플로우 상태"""

    request: ProfileRequest
    session_id: str | None
    sources: CollectedSources
    profile: GeneratedProfile
    source_context: SourceContext
    completion_score: int
