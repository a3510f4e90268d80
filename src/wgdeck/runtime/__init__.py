"""Runtime services shared by the engine and the dashboard."""
