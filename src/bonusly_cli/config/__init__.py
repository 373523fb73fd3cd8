"""CLI configuration and client profiles."""
