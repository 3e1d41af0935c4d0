"""
Service layer abstraction.

Services encapsulate the business logic for a domain.  Handlers talk to
services only, so the in‑memory store used here could be replaced by a
database without changing the API layer.
"""
