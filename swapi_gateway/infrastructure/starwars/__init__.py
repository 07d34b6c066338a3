"""SWAPI adapters for the Star Wars bounded context."""
