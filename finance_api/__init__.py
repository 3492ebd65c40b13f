"""Finance API: users, shared accounts and transactions over HTTP."""

__version__ = "0.1.0"
