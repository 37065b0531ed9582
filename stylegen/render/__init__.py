"""Source renderers for generated style files."""
