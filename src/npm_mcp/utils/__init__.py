"""Shared utilities for npm-mcp."""
