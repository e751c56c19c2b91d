"""Adapters – storage backends for persisted feature flags."""
