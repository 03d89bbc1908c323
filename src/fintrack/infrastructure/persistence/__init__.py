"""Persistence adapters for the transaction store."""
