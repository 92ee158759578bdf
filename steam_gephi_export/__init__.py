"""Export the friend graph of monitored Steam users from MongoDB to a Gephi edge-list CSV."""

__version__ = "0.1.0"

__all__ = ["cli", "config", "db", "errors", "exporter", "models"]