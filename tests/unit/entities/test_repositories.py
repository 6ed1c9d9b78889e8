"""Repository tests against an in-memory SQLite store."""

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from src.bookstore.core.models.results import SaveResult, SaveStatus
from src.bookstore.entities.service.author import Author, AuthorRepository
from src.bookstore.entities.service.book import Book, BookRepository


class TestSaveResult:
    """Legacy boolean view of the save outcome."""

    def test_committed_with_rows_succeeds(self):
        assert SaveResult.committed(1).succeeded is True

    def test_noop_does_not_succeed(self):
        result = SaveResult.noop()
        assert result.status is SaveStatus.NO_OP
        assert result.succeeded is False

    def test_failed_carries_cause(self):
        cause = RuntimeError("boom")
        result = SaveResult.failed(cause)
        assert result.is_failed
        assert result.cause is cause
        assert result.succeeded is False


class TestAuthorRepository:
    """Create/read/update/delete round trips for authors."""

    def test_create_assigns_id_and_round_trips(self, author_repository: AuthorRepository):
        author = Author(first_name="Ursula", last_name="Le Guin")

        result = author_repository.create(author)

        assert result.is_committed
        assert result.rows == 1
        assert author.id is not None and author.id > 0
        assert author_repository.find_by_id(author.id) == author

    def test_exists_agrees_with_find_by_id(self, author_repository: AuthorRepository, tolkien: Author):
        for record_id in (tolkien.id, tolkien.id + 1000):
            found = author_repository.find_by_id(record_id)
            assert author_repository.exists(record_id) is (found is not None)

    def test_find_all_is_repeatable(self, author_repository: AuthorRepository, tolkien: Author):
        author_repository.create(Author(first_name="Terry", last_name="Pratchett"))

        first = author_repository.find_all()
        second = author_repository.find_all()

        assert first == second
        assert [a.last_name for a in first] == ["Tolkien", "Pratchett"]

    def test_find_all_empty_store(self, author_repository: AuthorRepository):
        assert author_repository.find_all() == []

    def test_update_changes_stored_values(self, author_repository: AuthorRepository, tolkien: Author):
        changed = tolkien.model_copy(update={"bio": "Author of The Lord of the Rings"})

        result = author_repository.update(changed)

        assert result.is_committed
        assert author_repository.find_by_id(tolkien.id).bio == "Author of The Lord of the Rings"

    def test_update_without_changes_is_noop(self, author_repository: AuthorRepository, tolkien: Author):
        result = author_repository.update(tolkien.model_copy())

        assert result.is_noop
        assert result.succeeded is False

    def test_update_missing_record_fails(self, author_repository: AuthorRepository):
        result = author_repository.update(Author(id=999, first_name="No", last_name="One"))

        assert result.is_failed
        assert isinstance(result.cause, LookupError)

    def test_delete_removes_record(self, author_repository: AuthorRepository, tolkien: Author):
        result = author_repository.delete(tolkien)

        assert result.is_committed
        assert author_repository.find_by_id(tolkien.id) is None
        assert author_repository.exists(tolkien.id) is False

    def test_delete_detaches_books(
        self,
        author_repository: AuthorRepository,
        book_repository: BookRepository,
        tolkien: Author,
        hobbit: Book,
    ):
        result = author_repository.delete(tolkien)

        assert result.is_committed
        remaining = book_repository.find_by_id(hobbit.id)
        assert remaining is not None
        assert remaining.author_id is None


class TestBookRepository:
    """Book persistence, constraints and the author link."""

    def test_duplicate_isbn_is_rejected(self, book_repository: BookRepository, hobbit: Book):
        duplicate = Book(title="Bootleg Hobbit", isbn=hobbit.isbn)

        result = book_repository.create(duplicate)

        assert result.is_failed
        assert isinstance(result.cause, IntegrityError)
        assert duplicate.id is None
        # The session was rolled back and is still usable
        assert [b.title for b in book_repository.find_all()] == ["The Hobbit"]

    def test_unknown_author_is_rejected(self, book_repository: BookRepository):
        result = book_repository.create(Book(title="Orphan", author_id=4242))

        assert result.is_failed
        assert book_repository.find_all() == []

    def test_books_without_isbn_do_not_collide(self, book_repository: BookRepository):
        assert book_repository.create(Book(title="Anonymous I")).is_committed
        assert book_repository.create(Book(title="Anonymous II")).is_committed

    def test_find_by_author(
        self,
        book_repository: BookRepository,
        tolkien: Author,
        hobbit: Book,
    ):
        book_repository.create(Book(title="Unrelated"))

        books = book_repository.find_by_author(tolkien.id)

        assert [b.id for b in books] == [hobbit.id]

    def test_reads_return_entities_not_rows(self, book_repository: BookRepository, hobbit: Book):
        book = book_repository.find_by_id(hobbit.id)

        assert type(book) is Book
        assert book.price == pytest.approx(9.99)

    def test_repositories_share_one_session(self, session: Session, hobbit: Book):
        # A second repository instance sees the same committed state
        assert BookRepository(session).find_by_id(hobbit.id) == hobbit
