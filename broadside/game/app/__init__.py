"""Session orchestration."""
