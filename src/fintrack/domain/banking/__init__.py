"""Banking domain package.

This package contains the domain model for bank connections: the sources
a user can connect to, their credentials, raw records fetched from them
and the port a bank adapter implements.
"""
