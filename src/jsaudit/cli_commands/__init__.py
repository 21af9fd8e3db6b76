"""Typer command modules registered on the shared jsaudit app."""
