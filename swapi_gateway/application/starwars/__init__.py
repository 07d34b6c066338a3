"""Star Wars bounded context: use cases and DTOs."""
