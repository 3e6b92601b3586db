"""Service layer — order and menu operations returning ServiceResult.

Services may import from domain and config models.
They must never import from commands or output.
"""
