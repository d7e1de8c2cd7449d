"""Infrastructure layer — in-memory model, undo history, and file storage.

Infrastructure may import from domain. It must never import from
services, commands, or output.
"""
