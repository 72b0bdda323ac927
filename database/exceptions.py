class DatabaseError(Exception):
    """Base for all persistence errors raised by the league repositories."""


class NotFoundError(DatabaseError):
    """League, membership, match or season not found."""


class IntegrityError(DatabaseError):
    """Foreign key or check constraint violation (e.g. unknown team or season id)."""
