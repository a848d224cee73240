"""SQLAlchemy persistence: models, repositories and read adapters."""
