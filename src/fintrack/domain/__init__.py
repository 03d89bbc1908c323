"""Domain layer for FinTrack."""
