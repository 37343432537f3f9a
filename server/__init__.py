"""FastAPI server streaming live GNSS diagnostics."""
