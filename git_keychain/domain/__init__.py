"""Domain layer - Entities, value objects and errors for keychain lookups."""
