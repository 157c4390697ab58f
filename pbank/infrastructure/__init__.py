"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer: the SQL store, token signing
and password hashing.
"""
