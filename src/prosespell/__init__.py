"""prosespell: spell-check the prose embedded in JSX text and template literals."""

__version__ = "0.1.0"
