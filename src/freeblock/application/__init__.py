"""Application layer: events, settings, bootstrap and the BlockGraph facade."""
