"""
Interfaces layer package.

FastAPI routers and Pydantic response schemas.
Routes call use cases and return responses. No business logic here.
"""
