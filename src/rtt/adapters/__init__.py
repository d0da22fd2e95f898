"""Host integrations implementing the editor's display surface."""
