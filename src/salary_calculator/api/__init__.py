"""HTTP API for the salary calculator."""
