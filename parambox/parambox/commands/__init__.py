"""Command implementations for the parambox CLI."""
