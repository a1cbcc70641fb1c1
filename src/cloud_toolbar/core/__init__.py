"""Application infrastructure: settings, logging, workers and error handling."""
