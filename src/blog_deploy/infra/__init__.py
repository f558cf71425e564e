"""Infrastructure helpers: logging and paths."""
