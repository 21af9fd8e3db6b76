"""AI integrations for jsaudit."""
