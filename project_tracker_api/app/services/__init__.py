"""
Service layer abstraction.

Each service encapsulates the business logic for one resource and
works against the ``InMemoryStore`` it is handed, so API handlers stay
free of lookups and validation.  ``nesting`` holds the read-side joins
used by the single-record GETs and ``partial`` the helpers shared by
the update operations.
"""
