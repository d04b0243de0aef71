"""Keep, list, look up and delete text snippets stored in a JSON file."""

__version__ = "0.1.0"