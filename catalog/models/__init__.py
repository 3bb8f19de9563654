from catalog.models.book import Book
from catalog.models.user import User

__all__ = ["Book", "User"]
