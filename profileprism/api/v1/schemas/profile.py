"""프로필 API 스키마."""

from pydantic import BaseModel, ConfigDict, Field

from profileprism.domain.profile.presenter import ProfileView


class ArtifactPayload(BaseModel):
    """업로드된 이력서 파일. content는 base64 또는 data URL."""

    model_config = ConfigDict(populate_by_name=True)

    mime_type: str = Field(alias="mimeType", min_length=1)
    content: str = Field(min_length=1)


class GenerateRequest(BaseModel):
    """프로필 생성 요청."""

    model_config = ConfigDict(populate_by_name=True)

    github_token: str | None = Field(default=None, alias="githubToken")
    artifacts: list[ArtifactPayload] = Field(default_factory=list)


class GenerateResponse(BaseModel):
    """프로필 생성 응답."""

    model_config = ConfigDict(populate_by_name=True)

    profile: ProfileView
    completion_score: int = Field(alias="completionScore")
    source_context: dict | None = Field(default=None, alias="sourceContext")
