"""Sample catalog loaded into fresh stores."""

from loguru import logger

from src.bookshelf.entities.author import AuthorRepository
from src.bookshelf.entities.book import BookRepository

SAMPLE_BOOKS: tuple[tuple[str, str, int, str], ...] = (
    ("The Great Gatsby", "F. Scott Fitzgerald", 1925, "Fiction"),
    ("To Kill a Mockingbird", "Harper Lee", 1960, "Fiction"),
    ("1984", "George Orwell", 1949, "Dystopian"),
    ("Pride and Prejudice", "Jane Austen", 1813, "Romance"),
)

SAMPLE_AUTHORS: tuple[str, ...] = (
    "F. Scott Fitzgerald",
    "Harper Lee",
    "George Orwell",
    "Jane Austen",
)


def seed_catalog(books: BookRepository, authors: AuthorRepository) -> None:
    """Populate empty stores with the sample dataset."""
    for title, author, year, genre in SAMPLE_BOOKS:
        books.create(title, author, year, genre)
    for name in SAMPLE_AUTHORS:
        authors.add(name)
    logger.info(
        "Seeded catalog with {} books and {} authors", books.count(), authors.count()
    )
