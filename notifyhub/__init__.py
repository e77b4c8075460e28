"""Multi-tenant notification platform with a scheduled dispatch engine."""
