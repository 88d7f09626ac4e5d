"""Local catalog cache: models, repositories and services."""
