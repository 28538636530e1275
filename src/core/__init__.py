"""Profile editor core: domain, contracts, configuration and workflows."""
