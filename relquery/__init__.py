"""Building blocks for in-memory relational queries: containers, filters, sort-merge joins and loaders."""

__version__ = "0.1.0"