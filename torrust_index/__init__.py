"""Torrust Index data-access layer.

This package contains the persistence layer used by the Torrust Index to store
users, torrent listings, tracker keys, categories and content pages.

High-level architecture
-----------------------

- ``torrust_index.core.database.entities``: SQLModel table models, one module
  per table.
- ``torrust_index.core.database.repositories``: async repositories issuing the
  parameterized statements for each table.
- ``torrust_index.core.database.facade``: the ``Database`` façade consumed by
  request handlers. It maps driver results and failures into optional values,
  typed lookup results or ``ServiceError`` subclasses.

Typical workflow
----------------

1. ``db = await Database.connect(url)`` builds the pool and checks connectivity.
2. Request handlers call one façade method per use case.
3. ``await db.close()`` disposes the pool on shutdown.
"""
