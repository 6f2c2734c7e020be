"""Statistical diagnostics for generator output."""
