"""Core configuration for the Event Manager API."""
