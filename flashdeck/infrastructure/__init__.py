"""
Infrastructure layer.

- storage: SQLAlchemy and in-memory storage drivers
- api: FastAPI routers binding the request handler to HTTP
"""
