"""Services backing the dictionary lookup command."""
