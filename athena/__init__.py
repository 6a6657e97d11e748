"""Building blocks for an Attorney Online 2 server: packets, permissions, user IDs, logging, settings and master-server advertising."""

__version__ = "0.1.0"