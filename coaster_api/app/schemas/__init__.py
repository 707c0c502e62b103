"""
Pydantic schema definitions for API payloads.

Schemas double as the stored record type: the in-memory store keeps
``Coaster`` instances directly, so there is no separate persistence
model to convert from.
"""
