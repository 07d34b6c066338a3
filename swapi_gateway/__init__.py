"""
SWAPI Gateway: a REST façade over the public Star Wars API.

Application package root. Hexagonal architecture (ports & adapters).

Bounded contexts:
    - starwars: Starships and people fetched from SWAPI and re-served.

Layers:
    - domain: Entities, resource kinds, errors, ports (ABCs).
    - application: Use cases and query DTOs.
    - infrastructure: The httpx adapter implementing the upstream port.
    - interfaces: FastAPI routers, Pydantic response schemas.
    - shared: Cross-cutting concerns (errors, logging).
"""
