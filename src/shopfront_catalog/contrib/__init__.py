"""Optional framework integrations for the catalog."""
