"""Service layer — summation operations returning ServiceResult.

Services may import from the domain layer and the config section models.
They must never import from commands or output.
"""
