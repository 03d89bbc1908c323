"""FinTrack - personal finance transaction categorization and bank import."""

__version__ = "0.1.0"
