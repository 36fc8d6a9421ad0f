"""Seed Data — the records every fresh registry starts with.

Order is significant: reset restores exactly this sequence.
"""

SEED_USERS: tuple[tuple[str, int], ...] = (
    ("John", 23),
    ("Jane", 13),
    ("Joe", 33),
    ("Jack", 45),
)
