"""Rich console configuration."""

from rich.console import Console
from rich.theme import Theme

custom_theme = Theme({"error": "red bold"})

# Error console for stderr. The rendered entry bypasses rich and goes to stdout as-is.
error_console = Console(theme=custom_theme, stderr=True)
