"""Database adapters: engine, schema and the SQLAlchemy entity store."""
