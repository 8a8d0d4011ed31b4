"""Delivery interfaces exposed by the service."""
