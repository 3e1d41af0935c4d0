"""
Pydantic schema definitions for API payloads.

Request and response bodies are defined separately from the stored
record so the API representation can evolve independently of storage.
"""
