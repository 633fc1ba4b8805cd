"""Domain layer — descriptors, capability protocols, errors, value rules.

This layer depends only on stdlib and pydantic.
It must never import from mapping, infrastructure, or config.
"""
