"""Domain entities and value objects.

Pure data (Pydantic v2) plus the `Platform` enum. The domain knows nothing
about HTTP, terminals or package metadata.
"""
