"""colwidth.core — Foundation layer.

Contains the width types, width math, unit table, settings, columns loader
and report builder.
This module has NO dependencies on colwidth.commands or colwidth.registry.
Only the standard library is used here.
"""
