"""Infrastructure layer — filesystem, platform layout, SDK subprocesses.

This layer may import from domain (for the error taxonomy) and stdlib.
It must never import from services, commands, or output.
"""
