"""Configuration, logging and error handling shared by both services."""
