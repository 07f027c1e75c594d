from profileprism.api.v1.schemas.profile import (
    ArtifactPayload,
    GenerateRequest,
    GenerateResponse,
)

__all__ = ["ArtifactPayload", "GenerateRequest", "GenerateResponse"]
