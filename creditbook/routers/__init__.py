"""
FastAPI routers grouped by concern (HTML pages for people, JSON api).

Each module exposes an APIRouter included by the app factory in app.py.
"""
