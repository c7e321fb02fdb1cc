# Models package init
from notekeeper.models.note import Note
from notekeeper.models.user import User

__all__ = ["Note", "User"]
