"""Bundled text templates of the Python target language."""
