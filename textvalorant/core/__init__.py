"""Core engine: data definitions, events and the action system."""
