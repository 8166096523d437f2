"""Assembling groups, subgroups and constants from feed records."""
