"""
Service layer.

Each service encapsulates the logic for its domain.  Products are held
behind the ``ProductRepository`` interface, so the in-memory store can
be swapped for a database without changing the API handlers.
"""
