"""
Domain layer package.

Entities, value objects and port interfaces.
No framework imports, no IO.
"""
