"""Top-level pagesmith commands (auto-discovered by the dispatcher)."""
