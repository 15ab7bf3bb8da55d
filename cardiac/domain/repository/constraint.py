"""Storage constraints the domain relies on.

The once-per-day rules and email uniqueness are settled by unique
constraints when two requests race past the read-side check. Only a
violation of the named constraint is a business rejection; any other
IntegrityError (foreign key, check) is a storage failure.
"""

from sqlalchemy.exc import IntegrityError

UNIQUE_USER_EMAIL = "uq_users_email"
UNIQUE_DAILY_VOTE = "uq_votes_user_key_day"
UNIQUE_DAILY_SHARE = "uq_share_logs_user_coin_day"


def violated_constraint(error: IntegrityError) -> str | None:
    """Name of the constraint behind an IntegrityError, if the driver says.

    asyncpg reports it on the wrapped driver exception, psycopg on
    ``diag``.
    """
    orig = error.orig
    for source in (orig, getattr(orig, "__cause__", None), getattr(orig, "diag", None)):
        name = getattr(source, "constraint_name", None)
        if name:
            return name
    return None


def is_violation_of(error: IntegrityError, constraint: str) -> bool:
    """Whether the error was raised by the given constraint."""
    name = violated_constraint(error)
    if name is not None:
        return name == constraint
    # Postgres names the constraint in the message
    return f'"{constraint}"' in str(error.orig)
