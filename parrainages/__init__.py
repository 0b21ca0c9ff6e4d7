"""parrainages - 大統領選挙推薦署名データの取得・集計ツール."""

__version__ = "0.1.0"
