import asyncio
import base64
import io

import pdfplumber
from PIL import Image

from profileprism.core.logging import get_logger
from profileprism.domain.profile.analytics import AnalyticsObserver, notify
from profileprism.domain.profile.constants import (
    IMAGE_MIME_PREFIX,
    PAGE_SEPARATOR,
    PDF_MIME_TYPE,
)
from profileprism.domain.profile.schemas import ResumeArtifact
from profileprism.infra.ocr.engine import OcrEngine, get_ocr_engine

logger = get_logger(__name__)


def is_supported_mime_type(mime_type: str) -> bool:
    """PDF 또는 이미지인지 확인"""
    mime_type = mime_type.lower()
    return mime_type == PDF_MIME_TYPE or mime_type.startswith(IMAGE_MIME_PREFIX)


def select_supported_artifacts(
    artifacts: list[ResumeArtifact],
    analytics: AnalyticsObserver | None = None,
) -> list[ResumeArtifact]:
    """PDF와 이미지 파일만 순서대로 남김"""
    selected = [a for a in artifacts if is_supported_mime_type(a.mime_type)]
    if len(selected) < len(artifacts):
        logger.info("지원하지 않는 파일 제외 count=%d", len(artifacts) - len(selected))
    notify(analytics, "resume_data_set", artifact_count=len(selected))
    return selected


def decode_artifact_content(content: bytes | str) -> bytes:
    """파일 내용을 바이트로 변환

    문자열이면 base64로 보고, data URL 접두어가 있으면 제거한다.
    """
    if isinstance(content, bytes):
        return content
    payload = content.split(",", 1)[1] if content.startswith("data:") else content
    return base64.b64decode(payload)


def _read_pdf_pages(data: bytes) -> list[str]:
    """페이지별 단어를 순서대로 공백으로 이어붙인 텍스트 목록"""
    with pdfplumber.open(io.BytesIO(data)) as pdf:
        return [" ".join(word["text"] for word in page.extract_words()) for page in pdf.pages]


def _open_image(data: bytes) -> Image.Image:
    image = Image.open(io.BytesIO(data))
    image.load()
    return image


class DocumentTextExtractor:
    """이력서 파일 하나를 텍스트로 변환

    어떤 입력에도 예외를 던지지 않으며, 실패 시 빈 문자열을 반환한다.
    """

    def __init__(
        self,
        ocr_engine: OcrEngine | None = None,
        analytics: AnalyticsObserver | None = None,
    ):
        self._ocr_engine = ocr_engine
        self._analytics = analytics

    async def extract(self, artifact: ResumeArtifact) -> str:
        mime_type = artifact.mime_type.lower()

        if mime_type == PDF_MIME_TYPE:
            return await self._extract_pdf(artifact)
        if mime_type.startswith(IMAGE_MIME_PREFIX):
            return await self._extract_image(artifact)

        logger.info("지원하지 않는 형식 mime_type=%s", artifact.mime_type)
        return ""

    async def _extract_pdf(self, artifact: ResumeArtifact) -> str:
        try:
            data = decode_artifact_content(artifact.content)
            pages = await asyncio.to_thread(_read_pdf_pages, data)
        except Exception as e:
            logger.warning("PDF 텍스트 추출 실패 error=%s", type(e).__name__)
            notify(self._analytics, "pdf_extraction_error", message=str(e))
            return ""

        notify(self._analytics, "pdf_text_extracted", page_count=len(pages))
        return "".join(page + PAGE_SEPARATOR for page in pages)

    async def _extract_image(self, artifact: ResumeArtifact) -> str:
        engine = self._ocr_engine or get_ocr_engine()
        try:
            data = decode_artifact_content(artifact.content)
            image = await asyncio.to_thread(_open_image, data)
            text = await engine.recognize(image)
        except Exception as e:
            logger.warning("OCR 실패 error=%s", type(e).__name__)
            notify(self._analytics, "ocr_error", message=str(e))
            return ""

        notify(self._analytics, "ocr_engine_finished", length=len(text))
        return text
