from .auth import AuthenticationResult, AuthorCredentials
from .author import Author
from .book import Book

__all__ = ["Author", "AuthenticationResult", "AuthorCredentials", "Book"]
