"""
HTTP layer of the blog API.

``router`` aggregates the domain routers in ``endpoints``; ``deps``
wires the application's store and settings into service instances.
"""
