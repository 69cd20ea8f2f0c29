"""Algebra layer — registry, zone contexts, combinators and composition.

May import from domain and infrastructure.
Must never import from config, commands, output, or plugins.
"""
