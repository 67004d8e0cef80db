"""Integration tests for the HTTP application."""
