"""推薦署名レコードの値オブジェクト — Domain layer."""

from dataclasses import dataclass


CIVILITY_MALE = "M."
CIVILITY_FEMALE = "Mme"
KNOWN_CIVILITIES: frozenset[str] = frozenset({CIVILITY_MALE, CIVILITY_FEMALE})


@dataclass(frozen=True)
class EndorsementRecord:
    """推薦署名1件（署名した公選職者1名分）.

    同一年のコレクション内で name は一意ではない。
    年度間の突き合わせには (name, constituency) の組を使う。
    civility / mandate は前回選挙のデータに存在しないことがあるためNoneを許容する。
    """

    name: str
    constituency: str
    candidate: str
    civility: str | None = None
    mandate: str | None = None

    @property
    def identity_key(self) -> tuple[str, str]:
        """年度間の同一人物判定に使うキー."""
        return (self.name, self.constituency)

    def has_mandate_containing(self, substring: str) -> bool:
        """mandate が substring を含むか（大文字小文字を区別）."""
        return self.mandate is not None and substring in self.mandate
