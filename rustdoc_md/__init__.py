"""Render rustdoc JSON item graphs into cross-linked Markdown pages."""
