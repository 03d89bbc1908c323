"""Categorization domain package.

Assigns one category from a fixed vocabulary to every transaction, using
ordered keyword rules with a deterministic fallback.
"""
