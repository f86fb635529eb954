"""Domain layer — entities, lifecycle rules, and authorization policy.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
