"""Adapters binding the prefill engine to external services."""
