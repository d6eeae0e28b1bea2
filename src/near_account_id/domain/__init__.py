"""Domain layer: account ID validation, classification, and value types.

This layer depends only on stdlib and pydantic.
It must never import from services, codec, commands, or config.
"""
