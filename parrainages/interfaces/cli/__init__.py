"""parrainages CLI."""
