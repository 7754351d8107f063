"""HTTP API for the wage calculator tool."""
