"""ChatGPT-backed writing assistant: rewrite, summarize and translate text."""

__version__ = "0.1.0"
