"""Services used by the branch sweeper."""
