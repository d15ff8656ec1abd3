"""Classification, resolution and graph construction."""
