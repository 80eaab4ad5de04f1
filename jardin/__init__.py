"""Garden records in a SQLite database: crops, observations, contacts, planner phases, resources and SQL scripts."""

__version__ = "0.1.0"