"""Data transfer objects returned by application use cases."""
