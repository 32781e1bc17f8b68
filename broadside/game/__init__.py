"""Game domain, strategies and app orchestration."""
