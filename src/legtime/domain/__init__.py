"""Domain layer: value types, parsing rules, and display conventions.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
