from profileprism.core.config import settings
from profileprism.core.logging import get_logger
from profileprism.infra.llm.base import BaseLLMClient
from profileprism.infra.llm.openai_client import OpenAIClient
from profileprism.infra.llm.vllm_client import VLLMClient

logger = get_logger(__name__)

PROVIDERS: dict[str, type[BaseLLMClient]] = {
    "openai": OpenAIClient,
    "vllm": VLLMClient,
}

_generator_client: BaseLLMClient | None = None


def get_generator_client() -> BaseLLMClient:
    """프로필 생성용 LLM 클라이언트 반환, 첫 호출 때 생성 후 재사용

    Raises:
        ValueError: 지원하지 않는 프로바이더이거나 필수 설정이 없는 경우
    """
    global _generator_client

    if _generator_client is not None:
        return _generator_client

    provider = settings.llm_provider
    client_cls = PROVIDERS.get(provider)
    if client_cls is None:
        raise ValueError(f"지원하지 않는 LLM 프로바이더: {provider}")

    _generator_client = client_cls()
    logger.info(
        "LLM 클라이언트 초기화 provider=%s model=%s", provider, _generator_client.get_model_name()
    )
    return _generator_client


def reset_clients() -> None:
    """클라이언트 캐시 초기화 - 테스트용"""
    global _generator_client
    _generator_client = None
