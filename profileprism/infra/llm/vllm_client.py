from profileprism.core.config import settings
from profileprism.infra.llm.base import BaseLLMClient


class VLLMClient(BaseLLMClient):
    """vLLM 클라이언트 - OpenAI 호환 엔드포인트"""

    def _connection_options(self) -> dict:
        if not settings.vllm_api_url:
            raise ValueError("VLLM_API_URL이 설정되지 않았습니다")
        return {
            "api_key": settings.vllm_api_key or "EMPTY",
            "base_url": settings.vllm_api_url,
            "timeout": settings.vllm_timeout,
        }

    def get_model_name(self) -> str:
        return settings.vllm_model
