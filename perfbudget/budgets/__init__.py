"""Budget definitions: path patterns, validation and selection."""
