from dataclasses import dataclass

from src.bookshelf.core.services import CatalogService
from src.bookshelf.entities.author import AuthorRepository
from src.bookshelf.entities.book import BookRepository


@dataclass
class ApplicationDependencies:
    book_repository: BookRepository
    author_repository: AuthorRepository
    catalog_service: CatalogService
