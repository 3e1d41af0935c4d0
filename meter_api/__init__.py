"""
Top‑level package for the Meter API.

This file makes ``meter_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``meter_api.app.main``.  The HTTP client for the service lives in
``meter_api.client``.

The package provides no public exports; all functionality lives in
submodules.
"""

__all__ = []
