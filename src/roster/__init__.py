"""Roster query engine.

The roster layer turns a free-text question plus a serialized employee collection into a filtered,
sorted, limited and formatted answer, using deterministic rules only.
"""
