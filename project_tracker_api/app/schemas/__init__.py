"""
Pydantic schema definitions for API payloads.

Each resource (people, projects, tasks) defines its own Pydantic
models for request and response bodies.  Nested read views, which
combine several resources, live in ``views``.  JSON field names are
camelCase; Python attributes stay snake_case.
"""

from pydantic.alias_generators import to_camel

# Shared model configuration.  ``populate_by_name`` lets clients send
# either ``personId`` or ``person_id``.
CAMEL_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
    "from_attributes": True,
}
