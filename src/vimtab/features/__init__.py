"""Feature packages: expansion, batch sizing, instance probing and dispatch."""
