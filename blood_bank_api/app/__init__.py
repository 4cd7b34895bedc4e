"""
Application package initializer.

The project is split into a small number of layers: ``core`` holds
configuration, logging and error types, ``schemas`` the pydantic
payload models, ``services`` the entry store together with the
validation and query logic, and ``api`` the versioned HTTP routes
that translate service outcomes into responses.
"""

from .main import app  # noqa: F401
