"""Infrastructure adapters: persistence, security, email and realtime delivery."""
