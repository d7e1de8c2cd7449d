"""Parser layer — turns raw command lines into validated command objects.

Parsers may import from domain and services. They raise ``ParseError``
and never touch the model.
"""
