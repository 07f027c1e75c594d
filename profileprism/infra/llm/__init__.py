from profileprism.infra.llm.base import BaseLLMClient
from profileprism.infra.llm.client import generate_profile_text
from profileprism.infra.llm.factory import get_generator_client, reset_clients
from profileprism.infra.llm.openai_client import OpenAIClient
from profileprism.infra.llm.vllm_client import VLLMClient

__all__ = [
    "BaseLLMClient",
    "OpenAIClient",
    "VLLMClient",
    "get_generator_client",
    "reset_clients",
    "generate_profile_text",
]
