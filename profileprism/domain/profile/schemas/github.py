from pydantic import BaseModel, ConfigDict


class RepositorySummary(BaseModel):
    """필터링 및 README 조회가 끝난 레포지토리 요약"""

    model_config = ConfigDict(frozen=True)

    name: str
    full_name: str
    description: str | None = None
    language: str | None = None
    stars: int = 0
    readme_text: str | None = None
    private: bool = False
    archived: bool = False

    @classmethod
    def from_github(cls, data: dict) -> "RepositorySummary":
        """GitHub /user/repos 항목을 요약 모델로 변환"""
        name = data["name"]
        owner = (data.get("owner") or {}).get("login")
        full_name = data.get("full_name") or (f"{owner}/{name}" if owner else name)
        return cls(
            name=name,
            full_name=full_name,
            description=data.get("description"),
            language=data.get("language"),
            stars=data.get("stargazers_count") or 0,
            private=bool(data.get("private", False)),
            archived=bool(data.get("archived", False)),
        )


class CollectedSources(BaseModel):
    """SourceCollector 결과"""

    user: dict
    repositories: list[RepositorySummary]
