"""
API package containing versioned routes.

A version subpackage (e.g. ``v1``) exposes a top‑level ``router`` which
includes all of its endpoints.  New versions can be added by creating a
new subpackage with its own ``router``.
"""
