"""Authenticated task-management REST API."""
