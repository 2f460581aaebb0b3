# =========================
# hydration.py
# Solution history -> data-* attributes for the #hole element
# =========================

from sqlalchemy.exc import SQLAlchemyError

from golf.models.solution import Solution


class HydrationError(Exception):
    """The solutions store failed while hydrating a hole page."""

    def __init__(self, user_id, hole_id):
        super().__init__(f"failed to load solutions for user {user_id} on hole {hole_id!r}")
        self.user_id = user_id
        self.hole_id = hole_id


def escape_attribute(code):
    # Only the double quote is neutralised; the value always sits in "...".
    return code.replace('"', "&#34;")


def latest_successful_language(user_id, hole_id):
    """
    ` data-lang="<lang>"` for the most recent passing solution,
    or None when the user has never passed this hole.
    """
    try:
        solution = (
            Solution.query
            .filter_by(user_id=user_id, hole=hole_id, success=True)
            .order_by(Solution.submitted.desc(), Solution.lang)
            .first()
        )
    except SQLAlchemyError as e:
        raise HydrationError(user_id, hole_id) from e

    if solution is None:
        return None

    return f' data-lang="{solution.lang}"'


def all_language_code(user_id, hole_id):
    """
    One ` data-<lang>="<code>"` attribute per language the user has
    submitted for this hole, or None when there are no solutions.
    """
    try:
        solutions = (
            Solution.query
            .filter_by(user_id=user_id, hole=hole_id)
            .order_by(Solution.lang)
            .all()
        )
    except SQLAlchemyError as e:
        raise HydrationError(user_id, hole_id) from e

    if not solutions:
        return None

    return "".join(
        f' data-{s.lang}="{escape_attribute(s.code)}"' for s in solutions
    )


def hydrate(user_id, hole_id):
    """Both fragments, in the order they are written onto #hole."""
    fragments = (
        latest_successful_language(user_id, hole_id),
        all_language_code(user_id, hole_id),
    )
    return [f for f in fragments if f]
