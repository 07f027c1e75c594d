"""
Tesseract OCR 엔진 래퍼

엔진은 첫 사용 시 한 번만 초기화된다.
상태: uninitialized -> initializing -> ready | failed
failed 상태는 재시도하지 않는다.
"""

import asyncio
from enum import Enum

import pytesseract
from PIL import Image

from profileprism.core.config import settings
from profileprism.core.logging import get_logger

logger = get_logger(__name__)


class OcrEngineState(str, Enum):
    """OCR 엔진 상태"""

    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"
    FAILED = "failed"


class OcrUnavailableError(RuntimeError):
    """OCR 엔진 초기화 실패"""


class OcrEngine:
    """지연 초기화되는 Tesseract OCR 엔진"""

    def __init__(self, language: str | None = None, tesseract_cmd: str | None = None):
        self._language = language or settings.ocr_language
        self._tesseract_cmd = tesseract_cmd if tesseract_cmd is not None else settings.tesseract_cmd
        self._state = OcrEngineState.UNINITIALIZED
        self._error: Exception | None = None
        self._lock = asyncio.Lock()
        self.version: str | None = None

    @property
    def state(self) -> OcrEngineState:
        return self._state

    def _raise_failed(self) -> None:
        raise OcrUnavailableError(f"OCR 엔진 사용 불가: {type(self._error).__name__}") from self._error

    def _initialize(self) -> str:
        """tesseract 실행 파일 설정 후 버전 확인"""
        if self._tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = self._tesseract_cmd
        return str(pytesseract.get_tesseract_version())

    async def ensure_ready(self) -> None:
        """엔진 초기화, 동시 호출 시 한 번만 수행

        Raises:
            OcrUnavailableError: 초기화 실패 (이후 호출도 즉시 실패)
        """
        if self._state is OcrEngineState.READY:
            return
        if self._state is OcrEngineState.FAILED:
            self._raise_failed()

        async with self._lock:
            if self._state is OcrEngineState.READY:
                return
            if self._state is OcrEngineState.FAILED:
                self._raise_failed()

            self._state = OcrEngineState.INITIALIZING
            logger.info("OCR 엔진 초기화 시작 lang=%s", self._language)
            try:
                self.version = await asyncio.to_thread(self._initialize)
            except Exception as e:
                self._state = OcrEngineState.FAILED
                self._error = e
                logger.error("OCR 엔진 초기화 실패 error=%s", type(e).__name__)
                self._raise_failed()

            self._state = OcrEngineState.READY
            logger.info("OCR 엔진 초기화 완료 version=%s", self.version)

    async def recognize(self, image: Image.Image) -> str:
        """이미지에서 텍스트 인식

        Args:
            image: PIL 이미지

        Returns:
            인식된 텍스트
        """
        await self.ensure_ready()
        return await asyncio.to_thread(pytesseract.image_to_string, image, lang=self._language)


_default_engine: OcrEngine | None = None


def get_ocr_engine() -> OcrEngine:
    """프로세스 공용 OCR 엔진 반환"""
    global _default_engine

    if _default_engine is None:
        _default_engine = OcrEngine()

    return _default_engine


def reset_ocr_engine() -> None:
    """OCR 엔진 캐시 초기화 - 테스트용"""
    global _default_engine
    _default_engine = None
