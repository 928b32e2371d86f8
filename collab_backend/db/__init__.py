from collab_backend.db.json_database import JSONDatabase

__all__ = ["JSONDatabase"]
