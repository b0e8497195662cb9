from __future__ import annotations

import pytest
from semantic_version import Version

from lnproto.models.candidate import Candidate


@pytest.mark.unit
class TestCandidateParse:
    """Tests for Candidate.parse."""

    def test_plain_version(self) -> None:
        candidate = Candidate.parse("0.5.2-beta.rc3")

        assert candidate is not None
        assert candidate.raw == "0.5.2-beta.rc3"
        assert candidate.version == Version("0.5.2-beta.rc3")
        assert candidate.build_number is None
        assert candidate.has_build is False

    def test_build_number_is_split_off(self) -> None:
        candidate = Candidate.parse("0.5.2+12", position=3)

        assert candidate is not None
        assert candidate.version == Version("0.5.2")
        assert candidate.build_number == 12
        assert candidate.has_build is True
        assert candidate.position == 3

    def test_non_numeric_build(self) -> None:
        candidate = Candidate.parse("0.5.2+nightly")

        assert candidate is not None
        assert candidate.version == Version("0.5.2")
        assert candidate.build_number is None
        assert candidate.has_build is True

    @pytest.mark.parametrize("text", ["", "README", "0.5", "v0.5.2", None, 12])
    def test_malformed_returns_none(self, text: object) -> None:
        assert Candidate.parse(text) is None

    def test_str_is_raw_text(self) -> None:
        assert str(Candidate.parse("0.5.2+1")) == "0.5.2+1"


@pytest.mark.unit
class TestCandidateOutranks:
    """Tests for Candidate.outranks ordering."""

    def test_higher_version_wins(self) -> None:
        newer = Candidate.parse("0.5.2-beta.rc3", 1)
        older = Candidate.parse("0.5.1", 0)

        assert newer.outranks(older)
        assert not older.outranks(newer)

    def test_release_outranks_prerelease(self) -> None:
        release = Candidate.parse("0.5.2", 1)
        prerelease = Candidate.parse("0.5.2-rc1", 0)

        assert release.outranks(prerelease)

    def test_bare_entry_outranks_build_entry(self) -> None:
        bare = Candidate.parse("0.5.2", 5)
        built = Candidate.parse("0.5.2+9", 0)

        assert bare.outranks(built)
        assert not built.outranks(bare)

    def test_earlier_position_breaks_ties(self) -> None:
        first = Candidate.parse("0.5.2+9", 0)
        second = Candidate.parse("0.5.2+1", 1)

        assert first.outranks(second)
        assert not second.outranks(first)
