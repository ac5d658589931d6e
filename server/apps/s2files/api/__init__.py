"""HTTP API for s2files app."""
