from profileprism.domain.profile.prompts.generation import (
    PROFILE_GENERATOR_PROMPT,
    PROFILE_OUTPUT_SCHEMA,
    PROFILE_WRITING_RULES,
)

__all__ = [
    "PROFILE_GENERATOR_PROMPT",
    "PROFILE_OUTPUT_SCHEMA",
    "PROFILE_WRITING_RULES",
]
