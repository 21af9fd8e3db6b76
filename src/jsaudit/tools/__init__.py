"""Low-level network tools for jsaudit."""
