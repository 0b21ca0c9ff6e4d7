"""ドメイン値オブジェクト."""

from parrainages.domain.value_objects.endorsement_record import (
    CIVILITY_FEMALE,
    CIVILITY_MALE,
    KNOWN_CIVILITIES,
    EndorsementRecord,
)
from parrainages.domain.value_objects.web_page_content import WebPageContent


__all__ = [
    "CIVILITY_FEMALE",
    "CIVILITY_MALE",
    "KNOWN_CIVILITIES",
    "EndorsementRecord",
    "WebPageContent",
]
