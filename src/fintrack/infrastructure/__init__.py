"""Infrastructure layer: adapters for banks, persistence and the outside world."""
