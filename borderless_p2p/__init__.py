"""In-memory, append-only ledger for a peer-to-peer marketplace."""

__version__ = "0.1.0"