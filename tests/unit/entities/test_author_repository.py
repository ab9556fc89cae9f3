"""Tests for the author roster and its derived book lists."""

from src.bookshelf.entities.author import AuthorRepository
from src.bookshelf.entities.book import BookRepository, BookUpdate


class TestAuthorRepository:
    def test_seeded_roster(self, seeded_author_repository: AuthorRepository):
        authors = seeded_author_repository.list_all()

        assert [a.id for a in authors] == ["1", "2", "3", "4"]
        assert [a.name for a in authors] == [
            "F. Scott Fitzgerald",
            "Harper Lee",
            "George Orwell",
            "Jane Austen",
        ]

    def test_each_author_has_matching_book(
        self, seeded_author_repository: AuthorRepository
    ):
        for author in seeded_author_repository.list_all():
            assert len(author.books) == 1
            assert author.books[0].author == author.name

    def test_get_populates_books(self, seeded_author_repository: AuthorRepository):
        author = seeded_author_repository.get("3")

        assert author is not None
        assert author.name == "George Orwell"
        assert [b.title for b in author.books] == ["1984"]

    def test_get_unknown_returns_none(self, seeded_author_repository: AuthorRepository):
        assert seeded_author_repository.get("99") is None

    def test_get_by_name(self, seeded_author_repository: AuthorRepository):
        author = seeded_author_repository.get_by_name("Jane Austen")

        assert author is not None
        assert author.id == "4"
        assert [b.title for b in author.books] == ["Pride and Prejudice"]

    def test_get_by_name_is_exact(self, seeded_author_repository: AuthorRepository):
        assert seeded_author_repository.get_by_name("jane austen") is None

    def test_books_are_recomputed_on_every_read(
        self,
        seeded_book_repository: BookRepository,
        seeded_author_repository: AuthorRepository,
    ):
        seeded_book_repository.create("Emma", "Jane Austen", 1815, "Romance")
        assert len(seeded_author_repository.get("4").books) == 2

        seeded_book_repository.delete("4")
        assert [b.title for b in seeded_author_repository.get("4").books] == ["Emma"]

    def test_renaming_book_author_detaches_it(
        self,
        seeded_book_repository: BookRepository,
        seeded_author_repository: AuthorRepository,
    ):
        seeded_book_repository.update("3", BookUpdate(author="Eric Blair"))

        assert seeded_author_repository.get("3").books == []

    def test_author_ids_are_independent_of_book_ids(
        self, book_repository: BookRepository, author_repository: AuthorRepository
    ):
        for i in range(5):
            book_repository.create(f"B{i}", "Someone")

        author = author_repository.add("Someone")

        assert author.id == "1"
        assert len(author.books) == 5
        assert author_repository.count() == 1
