"""Domain layer — punctuation rules, outcome types, and spacing resolution.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
