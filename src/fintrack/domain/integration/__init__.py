"""Integration domain package.

Models the staged workflow that connects to a bank source and imports its
records into the transaction store.
"""
