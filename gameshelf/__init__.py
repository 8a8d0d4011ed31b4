"""GameShelf application package.

Layout mirrors a classic layered service: ``domain`` holds entities and
errors, ``infrastructure`` the persistence and delivery adapters,
``application`` the use cases and ``interfaces`` the HTTP surface.
"""
