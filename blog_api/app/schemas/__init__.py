"""
Pydantic schema definitions for API payloads.

Each domain (posts, comments, subscribers, contacts, users) defines its
own Pydantic models for request and response bodies.  Models use
snake_case attributes and are exposed on the wire in camelCase (see
``base.CamelModel``).
"""
