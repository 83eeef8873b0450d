"""Settings loading for the computation core."""
