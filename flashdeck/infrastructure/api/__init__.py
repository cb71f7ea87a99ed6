"""HTTP transport: FastAPI routers over the request handler."""
