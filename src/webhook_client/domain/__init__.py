"""Domain models for webhook messages and webhooks."""
