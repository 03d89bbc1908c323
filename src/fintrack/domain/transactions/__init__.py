"""Transactions domain package.

Holds the classified transaction model and the store contract that
imported and manually entered transactions are persisted through.
"""
