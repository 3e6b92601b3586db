"""Domain layer — ingredient kinds, catalog, ordering, chains, serving.

This layer depends only on the stdlib.
It must never import from services, config, commands, or output.
"""
