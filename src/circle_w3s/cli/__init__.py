"""Command-line front-end (``circle-w3s``) built on typer and rich."""
