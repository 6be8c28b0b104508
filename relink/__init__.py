"""relink - link-safe reorganization of Markdown documentation trees."""
