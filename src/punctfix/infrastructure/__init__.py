"""Infrastructure layer — system clipboard access.

This layer depends on stdlib and third-party libs (pyperclip).
It must never import from domain, services, commands, or output.
"""
