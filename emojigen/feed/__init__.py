"""Reading and classifying the Unicode emoji feed."""
