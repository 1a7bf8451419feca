"""Candidateエンティティのテスト."""

import pytest

from src.domain.entities import Candidate, Constituency, Party


class TestCandidate:
    def test_negative_score_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            Candidate(id=1, full_name="a", party_id=1, constituency_id=1, score=-1)

    def test_zero_score_is_allowed(self) -> None:
        candidate = Candidate(id=1, full_name="a", party_id=1, constituency_id=1, score=0)
        assert candidate.score == 0
        assert candidate.candidate_number is None


class TestParty:
    def test_default_color(self) -> None:
        assert Party(id=1, name="พรรค").color == "#ccc"


class TestConstituency:
    def test_str(self) -> None:
        constituency = Constituency(id=1001, name="เขต 1", province_id=10, area_number=1)
        assert str(constituency) == "เขต 1 (#1001)"
