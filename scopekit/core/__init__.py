"""Scope encodings and the contract they share."""
