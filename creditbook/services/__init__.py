"""
High-level use cases for the creditbook app.

Routers call these services instead of manipulating the stored collections
directly; services talk to storage through the adapters in
``creditbook.repositories``.
"""
