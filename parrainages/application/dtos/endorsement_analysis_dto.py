"""推薦署名分析のDTO."""

from dataclasses import dataclass, field
from pathlib import Path

from parrainages.domain.value_objects.endorsement_record import (
    CIVILITY_FEMALE,
    CIVILITY_MALE,
)


@dataclass
class AnalyzeEndorsementsInputDto:
    year: int
    candidate: str
    civility: str = CIVILITY_FEMALE
    share_civility: str = CIVILITY_MALE
    mandate_substring: str = "Maire"
    prior_year_file: Path | None = None


@dataclass
class AnalyzeEndorsementsOutputDto:
    """推薦署名分析の結果DTO.

    civility_percentage はレコードが0件のとき nan。
    transfers は前回データを指定しなかった場合 None。
    """

    year: int
    total_records: int
    civility_percentage: float
    mandate_count: int
    focused_count: int
    distinct_candidates: list[str] = field(default_factory=list)
    endorsements_by_candidate: dict[str, int] = field(default_factory=dict)
    transfers: dict[str, int] | None = None
