"""Timer-and-progress state machine."""
