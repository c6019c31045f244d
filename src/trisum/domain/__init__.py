"""Domain layer — constants, types, validation, risk checks, strategies.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
