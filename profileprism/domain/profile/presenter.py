"""생성된 프로필을 화면용 뷰 모델로 변환

모든 필드는 값이 없거나 타입이 맞지 않아도 대체 문구로 채워진다.
"""

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from profileprism.domain.profile.constants import (
    FALLBACK_DESCRIPTION,
    FALLBACK_INITIAL,
    FALLBACK_NAME,
    FALLBACK_PERIOD,
    FALLBACK_SUMMARY,
    FALLBACK_TITLE,
    SECTION_PLACEHOLDERS,
)
from profileprism.domain.profile.schemas import SourceContext


class ViewModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ListSection(ViewModel):
    """목록 섹션, 비어있으면 placeholder가 채워짐"""

    items: list[str]
    placeholder: str | None = None


class ExperienceView(ViewModel):
    position: str
    company: str
    period: str
    description: str


class EducationView(ViewModel):
    degree: str
    institution: str
    period: str


class ProjectView(ViewModel):
    name: str
    description: str
    technologies: ListSection


class ProfileView(ViewModel):
    """프로필 대시보드 뷰 모델"""

    name: str
    title: str
    initial: str
    summary: str
    completion_score: int
    skills: ListSection
    interests: ListSection
    recommendations: ListSection
    experience: list[ExperienceView]
    experience_placeholder: str | None = None
    education: list[EducationView]
    education_placeholder: str | None = None
    projects: list[ProjectView]
    projects_placeholder: str | None = None
    target_salary: str
    new_projects: ListSection
    new_goals: ListSection
    new_ideas: ListSection
    new_roles: ListSection
    new_life_paths: ListSection


def _text(value, fallback: str) -> str:
    if value is None or value == "" or isinstance(value, (list, dict)):
        return fallback
    return str(value)


def _entries(value) -> list[Mapping]:
    if not isinstance(value, list):
        return []
    return [entry for entry in value if isinstance(entry, Mapping)]


def _list_section(value, key: str) -> ListSection:
    items = [str(item) for item in value if item is not None] if isinstance(value, list) else []
    return ListSection(items=items, placeholder=None if items else SECTION_PLACEHOLDERS[key])


def _placeholder(items: list, key: str) -> str | None:
    return None if items else SECTION_PLACEHOLDERS[key]


def build_profile_view(profile: Mapping | None, completion_score: int) -> ProfileView:
    """프로필 JSON을 뷰 모델로 변환

    Args:
        profile: 생성된 프로필, 없으면 모든 필드가 대체 문구
        completion_score: 완성도 점수

    Returns:
        대체 문구가 적용된 뷰 모델
    """
    profile = profile or {}

    name = _text(profile.get("name"), FALLBACK_NAME)
    raw_name = profile.get("name")
    initial = raw_name[0] if isinstance(raw_name, str) and raw_name else FALLBACK_INITIAL

    experience = [
        ExperienceView(
            position=_text(entry.get("position"), ""),
            company=_text(entry.get("company"), ""),
            period=_text(entry.get("period"), FALLBACK_PERIOD),
            description=_text(entry.get("description"), FALLBACK_DESCRIPTION),
        )
        for entry in _entries(profile.get("experience"))
    ]
    education = [
        EducationView(
            degree=_text(entry.get("degree"), ""),
            institution=_text(entry.get("institution"), ""),
            period=_text(entry.get("period"), FALLBACK_PERIOD),
        )
        for entry in _entries(profile.get("education"))
    ]
    projects = [
        ProjectView(
            name=_text(entry.get("name"), ""),
            description=_text(entry.get("description"), FALLBACK_DESCRIPTION),
            technologies=_list_section(entry.get("technologies"), "technologies"),
        )
        for entry in _entries(profile.get("projects"))
    ]

    return ProfileView(
        name=name,
        title=_text(profile.get("title"), FALLBACK_TITLE),
        initial=initial,
        summary=_text(profile.get("summary"), FALLBACK_SUMMARY),
        completion_score=completion_score,
        skills=_list_section(profile.get("skills"), "skills"),
        interests=_list_section(profile.get("interests"), "interests"),
        recommendations=_list_section(profile.get("recommendations"), "recommendations"),
        experience=experience,
        experience_placeholder=_placeholder(experience, "experience"),
        education=education,
        education_placeholder=_placeholder(education, "education"),
        projects=projects,
        projects_placeholder=_placeholder(projects, "projects"),
        target_salary=_text(profile.get("targetSalary"), SECTION_PLACEHOLDERS["targetSalary"]),
        new_projects=_list_section(profile.get("newProjects"), "newProjects"),
        new_goals=_list_section(profile.get("newGoals"), "newGoals"),
        new_ideas=_list_section(profile.get("newIdeas"), "newIdeas"),
        new_roles=_list_section(profile.get("newRoles"), "newRoles"),
        new_life_paths=_list_section(profile.get("newLifePaths"), "newLifePaths"),
    )


def build_audit_snapshot(source_context: SourceContext | None) -> dict | None:
    """감사용 소스 스냅샷"""
    if source_context is None:
        return None
    return source_context.to_audit_dict()
