from profileprism.domain.profile.schemas.base import (
    EducationEntry,
    ExperienceEntry,
    GeneratedProfile,
    ProfileRequest,
    ProfileState,
    ProjectEntry,
    ResumeArtifact,
    SourceContext,
)
from profileprism.domain.profile.schemas.github import (
    CollectedSources,
    RepositorySummary,
)

__all__ = [
    "RepositorySummary",
    "CollectedSources",
    "ResumeArtifact",
    "SourceContext",
    "ExperienceEntry",
    "EducationEntry",
    "ProjectEntry",
    "GeneratedProfile",
    "ProfileRequest",
    "ProfileState",
]
