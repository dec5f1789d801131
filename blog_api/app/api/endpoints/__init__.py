"""
Endpoint modules.

Each module defines an APIRouter for one domain (auth, posts, comments,
subscribers, contacts, statistics).  The routers are aggregated in
``api/router.py`` and mounted under ``/api``.
"""
