"""
Star Wars bounded context.

Entities, resource kinds, domain errors and the upstream port.
No framework imports allowed.
"""
