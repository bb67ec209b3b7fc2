"""Domain layer — value types and pure sanitization functions.

This layer depends only on stdlib and pydantic.
It must never import from services, output, commands, or config.
"""
