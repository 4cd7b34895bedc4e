"""
Top‑level package for the Blood Bank API.

This file makes ``blood_bank_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``blood_bank_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
