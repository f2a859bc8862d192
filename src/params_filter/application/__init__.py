"""Application layer: normalization, filter engine and reporting."""
