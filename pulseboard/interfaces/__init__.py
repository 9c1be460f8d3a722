"""Interfaces layer - the Typer CLI and the FastAPI HTTP API."""
