"""Web API for the school roster."""
