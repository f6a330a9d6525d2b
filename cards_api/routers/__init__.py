"""
FastAPI routers grouped by domain (auth, cards, catalogue).

Each module exposes an APIRouter included by create_app(). Stores and services
are read from ``request.app.state`` through the dependencies in ``deps``.
"""
