from profileprism.core.config import settings
from profileprism.infra.llm.base import BaseLLMClient


class OpenAIClient(BaseLLMClient):
    """OpenAI API 클라이언트"""

    def _connection_options(self) -> dict:
        if not settings.openai_api_key:
            raise ValueError("OPENAI_API_KEY가 설정되지 않았습니다")
        return {"api_key": settings.openai_api_key, "timeout": settings.openai_timeout}

    def get_model_name(self) -> str:
        return settings.openai_model
