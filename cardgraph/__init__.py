"""Cardgraph: Relay-style cursor pagination over a card catalogue."""
