from .routes import raw_request_path, tree_routes

__all__ = ["tree_routes", "raw_request_path"]
