"""
Black Box wine selector.

Match a user's chosen words, foods and moods against a small fixed wine
catalog and return the wines ranked by how many of the chosen tags they carry.
"""
