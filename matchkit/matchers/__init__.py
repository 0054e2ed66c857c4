"""Matchers for booleans, bytes, equality, ordering, text, contexts, sequences, mappings and panics."""