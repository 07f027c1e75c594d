from collections.abc import Mapping

from profileprism.domain.profile.constants import COMPLETION_SECTIONS, SUMMARY_MIN_LENGTH


def _has_items(value) -> bool:
    return isinstance(value, list) and len(value) > 0


def compute_completion_score(profile: Mapping | None) -> int:
    """프로필 완성도 점수 계산 (0-100)

    skills, experience, education, projects, interests가 비어있지 않으면 각 1점,
    summary가 20자를 넘으면 1점. 6점 만점 기준 백분율을 반올림한다.
    """
    if not profile:
        return 0

    points = sum(1 for section in COMPLETION_SECTIONS if _has_items(profile.get(section)))

    summary = profile.get("summary")
    if isinstance(summary, str) and len(summary) > SUMMARY_MIN_LENGTH:
        points += 1

    return round(points / (len(COMPLETION_SECTIONS) + 1) * 100)
