"""CLI module for idoitclient."""
