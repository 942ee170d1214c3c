"""
Core utilities shared across the creditbook app.

This package hosts configuration helpers (env vars, paths, storage backend)
and small formatting helpers used by routers and templates. Services depend on
these primitives instead of reading os.environ or importing FastAPI.
"""
