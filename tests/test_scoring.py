"""완성도 점수 테스트"""

import pytest

from profileprism.domain.profile.scoring import compute_completion_score

FULL_PROFILE = {
    "summary": "Backend engineer focused on distributed systems.",
    "skills": ["Python"],
    "experience": [{"position": "Engineer"}],
    "education": [{"degree": "BSc"}],
    "projects": [{"name": "alpha"}],
    "interests": ["OSS"],
}


class TestComputeCompletionScore:
    """compute_completion_score 함수 테스트"""

    def test_full_profile(self):
        """모든 섹션이 있으면 100"""
        assert compute_completion_score(FULL_PROFILE) == 100

    @pytest.mark.parametrize("profile", [None, {}], ids=["none", "empty"])
    def test_empty(self, profile):
        """프로필이 없으면 0"""
        assert compute_completion_score(profile) == 0

    @pytest.mark.parametrize(
        "profile,expected",
        [
            ({"skills": ["Go"]}, 17),
            ({"skills": ["Go"], "projects": [{}], "interests": ["x"]}, 50),
            ({"skills": ["Go"], "summary": "Builds reliable data systems."}, 33),
            ({**FULL_PROFILE, "interests": []}, 83),
        ],
        ids=["one_section", "three_sections", "summary_counts", "five_of_six"],
    )
    def test_partial(self, profile, expected):
        """채워진 섹션 비율을 반올림"""
        assert compute_completion_score(profile) == expected

    @pytest.mark.parametrize(
        "summary",
        ["x" * 20, "", None, ["not", "a", "string"]],
        ids=["exactly_20", "empty", "none", "list"],
    )
    def test_summary_threshold(self, summary):
        """summary는 20자를 넘는 문자열이어야 점수"""
        assert compute_completion_score({"summary": summary}) == 0

    def test_non_list_sections_ignored(self):
        """리스트가 아닌 섹션은 점수 없음"""
        assert compute_completion_score({"skills": "Python", "projects": {"a": 1}}) == 0

    def test_idempotent(self):
        """같은 입력이면 같은 점수"""
        assert compute_completion_score(FULL_PROFILE) == compute_completion_score(FULL_PROFILE)
