"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The service manages a single resource, the meter, whose
routes live in ``api/v1/endpoints``.  Versioning is handled by grouping
routers under the ``api/<version>/`` hierarchy.
"""

from .main import app  # noqa: F401
