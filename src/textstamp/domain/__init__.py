"""Domain layer — cells, stamps, and their validation rules.

This layer depends only on stdlib, wcwidth, and regex.
It must never import from services, config, commands, or output.
"""
