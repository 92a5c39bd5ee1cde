"""Path introspection core: splitting, walking, probing, and rendering."""
