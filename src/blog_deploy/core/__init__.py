"""Core capabilities: configuration, process control and deploy steps."""
