"""User interface layers for adocsmith."""
