"""UI adapters hosting the dashboard and editor session."""
