"""Core domain, ports and use cases (no I/O)."""
