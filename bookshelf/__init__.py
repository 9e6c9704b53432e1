"""
In-memory book catalog.

``bookshelf.main`` exposes the REST API (list, create, update and
delete books) and ``bookshelf.catalog`` is a client that keeps a local
mirror of the collection and drives search, sorting, pagination and
the add/edit/delete flows against that API.
"""

__version__ = "1.0.0"
