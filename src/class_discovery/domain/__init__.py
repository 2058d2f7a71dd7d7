"""Discovery domain: models, ports and exceptions."""
