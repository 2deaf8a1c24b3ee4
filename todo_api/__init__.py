"""ToDo CRUD service: request dispatch, error mapping and storage adapters."""

__version__ = "1.0.0"
