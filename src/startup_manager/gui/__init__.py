"""Qt user interface for Startup Manager."""
