"""emojigen: build customizable emoji family catalogues from the Unicode emoji feed."""

__version__ = "0.1.0"
