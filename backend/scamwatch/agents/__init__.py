"""Generation agents: intelligence researcher and narrative analyst."""
