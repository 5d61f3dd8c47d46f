"""Integrations with third-party query layers."""
