"""Internal building blocks: constants, object-literal builders, HTML rendering."""
