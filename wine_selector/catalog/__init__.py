"""
Wine catalog package.

Responsibilities:
- Declare the selectable word / food / mood option lists.
- Load the static wine catalog from CSV into immutable models.
- Reject malformed catalog rows and unknown tags before they reach the engine.
"""
