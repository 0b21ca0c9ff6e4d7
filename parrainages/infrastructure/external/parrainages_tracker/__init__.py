"""Les Echos 推薦署名トラッカーのクライアントパッケージ."""

from .client import ParrainagesTrackerClient
from .converter import EndorsementRecordConverter


__all__ = [
    "EndorsementRecordConverter",
    "ParrainagesTrackerClient",
]
