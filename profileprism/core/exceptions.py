from enum import Enum

from fastapi import Request
from fastapi.responses import JSONResponse

from profileprism.core.config import settings


class ErrorCode(str, Enum):
    """에러 코드 열거형"""

    GITHUB_UNAUTHORIZED = "GITHUB_UNAUTHORIZED"
    GITHUB_API_ERROR = "GITHUB_API_ERROR"
    INVALID_INPUT = "INVALID_INPUT"
    LLM_UNAVAILABLE = "LLM_UNAVAILABLE"
    LLM_API_ERROR = "LLM_API_ERROR"
    GENERATE_PARSE_ERROR = "GENERATE_PARSE_ERROR"


class CustomException(Exception):
    def __init__(
        self,
        status_code: int,
        error_code: ErrorCode | str,
        message: str,
        detail: str | None = None,
    ):
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        self.detail = detail
        self.extra: dict | None = None
        super().__init__(message)


class AuthenticationError(CustomException):
    def __init__(self, detail: str | None = None):
        super().__init__(
            status_code=401,
            error_code=ErrorCode.GITHUB_UNAUTHORIZED,
            message="GitHub 인증 정보가 없습니다",
            detail=detail,
        )


class FetchError(CustomException):
    def __init__(self, detail: str | None = None):
        super().__init__(
            status_code=502,
            error_code=ErrorCode.GITHUB_API_ERROR,
            message="GitHub API 호출에 실패했습니다",
            detail=detail,
        )


class PreconditionError(CustomException):
    def __init__(self, detail: str | None = "source data missing"):
        super().__init__(
            status_code=400,
            error_code=ErrorCode.INVALID_INPUT,
            message="프로필 생성에 필요한 데이터가 없습니다",
            detail=detail,
        )


class TransportError(CustomException):
    def __init__(self, detail: str | None = None):
        super().__init__(
            status_code=503,
            error_code=ErrorCode.LLM_UNAVAILABLE,
            message="생성 서비스에 연결할 수 없습니다",
            detail=detail,
        )


class GenerationError(CustomException):
    def __init__(self, detail: str | None = None):
        super().__init__(
            status_code=502,
            error_code=ErrorCode.LLM_API_ERROR,
            message="LLM 호출에 실패했습니다",
            detail=detail,
        )


class ExtractionError(CustomException):
    def __init__(self, detail: str | None = "could not extract structured result"):
        super().__init__(
            status_code=502,
            error_code=ErrorCode.GENERATE_PARSE_ERROR,
            message="LLM 응답에서 프로필을 추출하지 못했습니다",
            detail=detail,
        )


def register_exception_handlers(app):
    @app.exception_handler(CustomException)
    async def custom_exception_handler(request: Request, exc: CustomException):
        content = {
            "error_code": exc.error_code,
            "message": exc.message,
        }
        if exc.detail and not settings.is_production:
            content["detail"] = exc.detail
        if exc.extra:
            content.update(exc.extra)

        return JSONResponse(
            status_code=exc.status_code,
            content=content,
        )
