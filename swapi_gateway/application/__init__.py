"""
Application layer package.

Use cases orchestrate domain ports. They know nothing about HTTP.
"""
