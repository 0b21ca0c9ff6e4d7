"""ドメインサービス."""

from parrainages.domain.services.endorsement_statistics_service import (
    EndorsementStatisticsService,
)
from parrainages.domain.services.sponsor_transfer_service import SponsorTransferService


__all__ = [
    "EndorsementStatisticsService",
    "SponsorTransferService",
]
