"""npm-cli command groups, one module per resource family."""
