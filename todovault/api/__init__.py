"""HTTP API helpers shared by the TodoVault blueprints."""
