"""SponsorTransferServiceのテスト."""

import pytest

from parrainages.domain.services.endorsement_statistics_service import (
    EndorsementStatisticsService,
)
from parrainages.domain.services.sponsor_transfer_service import SponsorTransferService
from parrainages.infrastructure.external.parrainages_tracker.converter import (
    EndorsementRecordConverter,
)
from tests.fixtures.endorsement_record_factories import (
    make_endorsement,
    make_sample_2017,
    make_sample_2022,
)


@pytest.fixture
def service() -> SponsorTransferService:
    return SponsorTransferService()


class TestFindPriorRecord:
    def test_matches_on_name_and_constituency(self, service) -> None:
        record = make_endorsement(name="Marie Curie", constituency="Hauts-de-Seine")
        prior = service.find_prior_record(record, make_sample_2017())
        assert prior is not None
        assert prior.candidate == "fillon"

    def test_same_name_other_constituency_is_not_a_match(self, service) -> None:
        record = make_endorsement(name="Marie Curie", constituency="Paris")
        assert service.find_prior_record(record, make_sample_2017()) is None

    def test_first_match_wins(self, service) -> None:
        prior = [
            make_endorsement(name="A", constituency="X1", candidate="fillon"),
            make_endorsement(name="A", constituency="X1", candidate="hamon"),
        ]
        record = make_endorsement(name="A", constituency="X1")
        assert service.find_prior_record(record, prior).candidate == "fillon"


class TestTallyPriorCandidates:
    """tally_prior_candidatesメソッドのテスト."""

    def test_tally_for_zemmour_endorsers(self, service) -> None:
        current = [r for r in make_sample_2022() if r.candidate == "zemmour"]
        result = service.tally_prior_candidates(current, make_sample_2017())
        assert result == {"fillon": 1, "dupontaignan": 1}

    def test_unmatched_records_contribute_nothing(self, service) -> None:
        current = [
            make_endorsement(name="Marie Curie", constituency="Hauts-de-Seine"),
            make_endorsement(name="Inconnu", constituency="Lozère"),
        ]
        result = service.tally_prior_candidates(current, make_sample_2017())
        assert result == {"fillon": 1}

    def test_empty_current_collection(self, service) -> None:
        assert service.tally_prior_candidates([], make_sample_2017()) == {}

    def test_empty_prior_collection(self, service) -> None:
        assert service.tally_prior_candidates(make_sample_2022(), []) == {}

    def test_idempotent(self, service) -> None:
        current = make_sample_2022()
        prior = make_sample_2017()
        first = service.tally_prior_candidates(current, prior)
        second = service.tally_prior_candidates(current, prior)
        assert first == second

    def test_end_to_end_scenario(self, service) -> None:
        """JSONからの変換を含めた突き合わせ."""
        current = EndorsementRecordConverter.to_records(
            [
                {
                    "name": "A",
                    "constituency": "X1",
                    "candidate": "zemmour",
                    "civility": "Mme",
                    "mandate": "Maire de Paris",
                }
            ]
        )
        prior = EndorsementRecordConverter.to_records(
            [{"name": "A", "constituency": "X1", "candidate": "fillon"}]
        )
        assert service.tally_prior_candidates(current, prior) == {"fillon": 1}

        statistics = EndorsementStatisticsService()
        assert statistics.count_by_mandate_substring(current, "Maire") == 1
        assert (
            statistics.count_by_candidate_and_civility_and_mandate(
                current, "zemmour", "Mme", "Maire"
            )
            == 1
        )
