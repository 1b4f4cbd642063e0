"""
Recommendation engine.

Responsibilities:
- Accept a selection of words, foods and moods.
- Score every catalog wine by the share of selected tags it carries.
- Drop non-matching wines and rank the rest, keeping catalog order on ties.
- Report whether the view is idle, empty, or showing matches.
"""
