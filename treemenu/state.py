"""
Per-session expansion state for menu groups.

The tree builder only reads this mapping. It is written when the user
toggles a group, and lives in the session for as long as the session does.
"""

from .builder import toggle

SESSION_KEY = "treemenu_expansion"


class MenuState:
    """Session-backed mapping from parent group key to expanded flag."""

    def __init__(self, session):
        self.session = session

    def as_mapping(self) -> dict:
        stored = self.session.get(SESSION_KEY)
        if not isinstance(stored, dict):
            return {}
        return {str(key): bool(value) for key, value in stored.items()}

    def is_expanded(self, parent_name) -> bool:
        return self.as_mapping().get(parent_name, False)

    def toggle(self, parent_name, *, exclusive=False) -> dict:
        """Flip *parent_name* and store the result. Returns the new mapping."""
        updated = toggle(self.as_mapping(), parent_name, exclusive=exclusive)
        self.session[SESSION_KEY] = updated
        return updated

    def clear(self) -> None:
        self.session.pop(SESSION_KEY, None)
