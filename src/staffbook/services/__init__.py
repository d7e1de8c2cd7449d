"""Service layer — command objects executed against the model.

Services may import from domain and infrastructure layers.
They must never import from commands, output, or parsing.
"""
