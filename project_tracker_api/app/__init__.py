"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each resource (people, projects, tasks) has its own
schema module, service and router defined in ``api/v1/endpoints``.
Versioning is handled by grouping routers under the
``api/<version>/`` hierarchy.
"""

from .main import app, create_app  # noqa: F401
