"""Core — models, engine, configuration and stage definitions."""
