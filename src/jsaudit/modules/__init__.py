"""Scanning modules for jsaudit."""
