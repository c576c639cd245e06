"""Strongly typed identifiers for comment vote entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType

# Surrogate keys assigned by the database
VoteId = NewType("VoteId", int)

# Identifiers owned by collaborators (comments, accounts)
CommentId = NewType("CommentId", int)
AccountId = NewType("AccountId", int)
