"""Domain layer — field names, instants, temporal values and errors.

This layer depends only on the stdlib.
It must never import from algebra, infrastructure, commands, or config.
"""
