from abc import ABC, abstractmethod

from langchain_core.language_models import BaseChatModel
from langchain_openai import ChatOpenAI

from profileprism.core.config import settings


class BaseLLMClient(ABC):
    """OpenAI 호환 채팅 모델 클라이언트

    생성 파라미터와 재시도 정책은 프로바이더와 관계없이 같고,
    하위 클래스는 모델 이름과 접속 정보만 제공한다.
    """

    def __init__(self):
        self._model = ChatOpenAI(
            model=self.get_model_name(),
            max_tokens=settings.generation_max_tokens,
            temperature=settings.generation_temperature,
            max_retries=0,
            **self._connection_options(),
        )

    @abstractmethod
    def _connection_options(self) -> dict:
        """API 키, 엔드포인트, 타임아웃

        Raises:
            ValueError: 필수 설정이 없는 경우
        """

    @abstractmethod
    def get_model_name(self) -> str:
        """사용 중인 모델 이름 반환"""

    def get_chat_model(self) -> BaseChatModel:
        """LangChain 채팅 모델 반환"""
        return self._model
