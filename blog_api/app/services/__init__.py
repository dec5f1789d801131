"""
Service layer abstraction.

Each service encapsulates business logic for a domain and operates on
the ``BlogStore`` it is constructed with.  API handlers obtain service
instances through the dependencies in ``api.deps``.
"""
