"""Launch catalog: SpaceX import, flight-number assignment, and lifecycle updates."""
