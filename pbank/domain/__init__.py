"""
Domain layer package.

Contains entities, value objects and port interfaces.
No framework imports, no IO, no side effects.
"""
