"""Repository tests."""

from datetime import datetime, timezone

from pytest import raises

from models.todo import Todo
from repositories.todo_repository import RecordNotFoundError, TodoRepository
from repositories.user_seeder import add_user_to_seed, seed_users


def make_todo(text: str = "Buy milk", user_id: int = 1) -> Todo:
    return Todo(text=text, user_id=user_id, created_by="John Doe")


class TestTodoRepository:
    """Test suite for TodoRepository."""

    def test_create_assigns_sequential_ids(self, repository: TodoRepository) -> None:
        """IDs start at 1 and increase by one per create."""
        first = repository.create(make_todo("one"))
        second = repository.create(make_todo("two"))

        assert first.id == 1
        assert second.id == 2

    def test_ids_are_not_reused_after_delete(self, repository: TodoRepository) -> None:
        """A deleted ID is never handed out again."""
        first = repository.create(make_todo("one"))
        repository.delete(first.id)

        second = repository.create(make_todo("two"))
        assert second.id == 2

    def test_find_all_keeps_insertion_order(self, repository: TodoRepository) -> None:
        """Todos come back in the order they were created."""
        for text in ("a", "b", "c"):
            repository.create(make_todo(text))

        assert [todo.text for todo in repository.find_all()] == ["a", "b", "c"]

    def test_find_all_empty(self, repository: TodoRepository) -> None:
        """A fresh repository has no todos."""
        assert repository.find_all() == []

    def test_find_by_id(self, repository: TodoRepository) -> None:
        """Lookup by ID returns the stored todo."""
        created = repository.create(make_todo())

        found = repository.find_by_id(created.id)
        assert found == created

    def test_find_by_id_missing(self, repository: TodoRepository) -> None:
        """Unknown IDs raise RecordNotFoundError."""
        with raises(RecordNotFoundError) as exc_info:
            repository.find_by_id(42)
        assert exc_info.value.entity == "todo"
        assert exc_info.value.record_id == 42

    def test_find_by_user_id(self, repository: TodoRepository) -> None:
        """Only todos of the given user are returned."""
        repository.create(make_todo("mine 1", user_id=1))
        repository.create(make_todo("theirs", user_id=2))
        repository.create(make_todo("mine 2", user_id=1))

        assert [todo.text for todo in repository.find_by_user_id(1)] == ["mine 1", "mine 2"]
        assert repository.find_by_user_id(3) == []

    def test_update_replaces_in_place(self, repository: TodoRepository) -> None:
        """Updating keeps the todo at its position."""
        first = repository.create(make_todo("first"))
        repository.create(make_todo("second"))

        first.text = "first, edited"
        repository.update(first)

        assert [todo.text for todo in repository.find_all()] == ["first, edited", "second"]

    def test_update_missing(self, repository: TodoRepository) -> None:
        """Updating an unknown todo raises RecordNotFoundError."""
        ghost = make_todo()
        ghost.id = 99
        with raises(RecordNotFoundError):
            repository.update(ghost)

    def test_delete(self, repository: TodoRepository) -> None:
        """Deleted todos are gone."""
        todo = repository.create(make_todo())

        repository.delete(todo.id)

        assert repository.find_all() == []
        with raises(RecordNotFoundError):
            repository.find_by_id(todo.id)

    def test_delete_missing(self, repository: TodoRepository) -> None:
        """Deleting twice fails the second time."""
        todo = repository.create(make_todo())
        repository.delete(todo.id)

        with raises(RecordNotFoundError):
            repository.delete(todo.id)

    def test_returned_records_are_copies(self, repository: TodoRepository) -> None:
        """Changing a returned todo does not change the stored one."""
        created = repository.create(make_todo("original"))
        created.text = "changed"

        listed = repository.find_all()
        listed[0].completed = True

        stored = repository.find_by_id(created.id)
        assert stored.text == "original"
        assert stored.completed is False

    def test_input_records_are_copied(self, repository: TodoRepository) -> None:
        """Changing the object passed to create/update afterwards has no effect."""
        todo = make_todo("original")
        created = repository.create(todo)
        todo.text = "changed after create"

        created.text = "updated"
        repository.update(created)
        created.text = "changed after update"

        assert repository.find_by_id(created.id).text == "updated"

    def test_mutate_if_present(self, repository: TodoRepository) -> None:
        """The mutation result is stored and returned."""
        todo = repository.create(make_todo())

        def complete(current: Todo) -> Todo:
            current.completed = True
            return current

        result = repository.mutate_if_present(todo.id, complete)

        assert result.completed is True
        assert repository.find_by_id(todo.id).completed is True

    def test_mutate_if_present_keeps_id(self, repository: TodoRepository) -> None:
        """A mutation cannot move a todo to another identity."""
        todo = repository.create(make_todo())

        def renumber(current: Todo) -> Todo:
            current.id = 500
            return current

        result = repository.mutate_if_present(todo.id, renumber)
        assert result.id == todo.id
        with raises(RecordNotFoundError):
            repository.find_by_id(500)

    def test_mutate_if_present_missing(self, repository: TodoRepository) -> None:
        """Mutating an unknown todo never calls the mutation."""
        calls = []

        with raises(RecordNotFoundError):
            repository.mutate_if_present(7, lambda todo: calls.append(todo) or todo)
        assert calls == []

    def test_clear(self, repository: TodoRepository) -> None:
        """Clearing empties todos and restarts numbering."""
        repository.create(make_todo())
        repository.create(make_todo())

        repository.clear()

        assert repository.find_all() == []
        assert repository.create(make_todo()).id == 1
        assert len(repository.get_all_users()) == 3


class TestUsers:
    """Test suite for the user side of the repository."""

    def test_default_seed(self, repository: TodoRepository) -> None:
        """Three users are seeded and returned ordered by ID."""
        users = repository.get_all_users()

        assert [(user.id, user.name, user.email) for user in users] == [
            (1, "John Doe", "john@example.com"),
            (2, "Jane Smith", "jane@example.com"),
            (3, "Bob Johnson", "bob@example.com"),
        ]

    def test_get_user_by_id(self, repository: TodoRepository) -> None:
        """Known users are found, unknown ones raise."""
        assert repository.get_user_by_id(2).name == "Jane Smith"

        with raises(RecordNotFoundError) as exc_info:
            repository.get_user_by_id(999)
        assert exc_info.value.entity == "user"

    def test_returned_users_are_copies(self, repository: TodoRepository) -> None:
        """Changing a returned user does not affect the repository."""
        user = repository.get_user_by_id(1)
        user.name = "Someone Else"

        assert repository.get_user_by_id(1).name == "John Doe"

    def test_seed_timestamp(self) -> None:
        """All seeded users share the given creation time."""
        now = datetime(2024, 5, 1, tzinfo=timezone.utc)
        users = seed_users(now)

        assert {user.created_at for user in users.values()} == {now}

    def test_custom_seed(self) -> None:
        """Extra users can be added to the seed before building a repository."""
        users = seed_users()
        add_user_to_seed(users, 4, "Alice Doe", "alice@example.com")

        repository = TodoRepository(users)
        users[4].name = "changed after construction"

        assert repository.get_user_by_id(4).name == "Alice Doe"
        assert len(repository.get_all_users()) == 4

    def test_add_user_to_seed_rejects_bad_id(self) -> None:
        """Seed users need a positive ID."""
        with raises(ValueError):
            add_user_to_seed({}, 0, "Nobody", "nobody@example.com")
