"""JSON persistence and catalog loading."""
