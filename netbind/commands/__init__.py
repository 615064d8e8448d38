"""Command implementations for the netbind CLI."""
