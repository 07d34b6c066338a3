"""
Shared module package.

Cross-cutting concerns used across bounded contexts:
- Error handling and mapping
- Logging configuration
"""
