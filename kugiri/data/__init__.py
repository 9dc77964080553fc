"""Model data bundled with kugiri."""
