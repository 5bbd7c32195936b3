"""Shared helpers for views and templates."""
