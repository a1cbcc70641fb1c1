"""Client and capability tables for the sync engine control API."""
