import os

import openai
from langchain_core.messages import HumanMessage
from langfuse.langchain import CallbackHandler

from profileprism.core.config import settings
from profileprism.core.exceptions import GenerationError, TransportError
from profileprism.core.logging import get_logger
from profileprism.infra.llm.factory import get_generator_client

logger = get_logger(__name__)

if settings.langfuse_public_key:
    os.environ["LANGFUSE_PUBLIC_KEY"] = settings.langfuse_public_key
if settings.langfuse_secret_key:
    os.environ["LANGFUSE_SECRET_KEY"] = settings.langfuse_secret_key
if settings.langfuse_base_url:
    os.environ["LANGFUSE_HOST"] = settings.langfuse_base_url


def get_langfuse_handler() -> CallbackHandler | None:
    """Langfuse 콜백 핸들러 반환"""
    if not settings.langfuse_public_key or not settings.langfuse_secret_key:
        return None

    return CallbackHandler()


def _upstream_error_detail(error: openai.APIStatusError) -> str:
    """업스트림 에러 응답에서 메시지 추출"""
    body = error.body
    if isinstance(body, dict):
        nested = body.get("error")
        if isinstance(nested, dict):
            body = nested
        if body.get("message"):
            return str(body["message"])
    return error.message


def _message_text(content) -> str:
    """AIMessage content를 문자열로 변환"""
    if isinstance(content, str):
        return content
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


async def generate_profile_text(prompt: str, session_id: str | None = None) -> str:
    """프롬프트 한 건으로 프로필 생성 요청, 응답 원문 반환

    Args:
        prompt: 조립된 프롬프트
        session_id: Langfuse 세션 ID

    Returns:
        앞뒤 공백을 제거한 응답 텍스트

    Raises:
        GenerationError: 생성 서비스가 오류 상태 코드를 반환한 경우
        TransportError: 생성 서비스에 연결할 수 없는 경우
    """
    logger.debug("프로필 생성 요청 prompt_length=%d", len(prompt))

    try:
        client = get_generator_client()
    except ValueError as e:
        raise TransportError(detail=str(e)) from e

    langfuse_handler = get_langfuse_handler()
    config = {
        "callbacks": [langfuse_handler] if langfuse_handler else [],
        "metadata": {
            "langfuse_session_id": session_id,
            "langfuse_tags": ["profile", "generate"],
        },
    }

    try:
        result = await client.get_chat_model().ainvoke(
            [HumanMessage(content=prompt)], config=config
        )
    except openai.APIStatusError as e:
        detail = _upstream_error_detail(e)
        logger.error("LLM API 오류 status=%d detail=%s", e.status_code, detail)
        raise GenerationError(detail=f"API request failed: {detail}") from e
    except openai.APIConnectionError as e:
        logger.error("LLM 연결 실패 error=%s", type(e).__name__)
        raise TransportError(detail=type(e).__name__) from e

    text = _message_text(result.content).strip()
    logger.debug("프로필 생성 완료 model=%s length=%d", client.get_model_name(), len(text))
    return text
