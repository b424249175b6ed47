"""Shell integration snippets emitted by ``wt shellenv``."""
