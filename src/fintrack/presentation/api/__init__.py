"""FastAPI application for FinTrack."""
