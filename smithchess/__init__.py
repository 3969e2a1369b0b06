"""Chess board model, move generation, Smith-notation game reading and board rendering."""

__version__ = "0.1.0"