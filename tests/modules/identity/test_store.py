import threading
import pytest
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta

from modules.identity.exceptions import UserAlreadyExistsError, UserNotFoundError
from modules.identity.store import InMemoryUserStore


class TestCreate:
    def test_create_then_lookup_by_every_key(self, store, make_user):
        """GetByID, GetByEmail and GetByUsername should agree."""
        store.create(make_user())

        by_id = store.get_by_id("user-123")
        by_email = store.get_by_email("test@example.com")
        by_username = store.get_by_username("tester")

        assert by_id == by_email == by_username
        assert by_id.password_hash == "not-a-real-hash"

    def test_create_stamps_timestamps_and_forces_active(self, clock, make_user):
        """Store should set timestamps and activate the record."""
        store = InMemoryUserStore(clock=clock)
        store.create(make_user(is_active=False))

        user = store.get_by_id("user-123")
        assert user.is_active is True
        assert user.created_at == clock.now
        assert user.updated_at == clock.now

    @pytest.mark.parametrize(
        "overrides, field",
        [
            ({"user_id": "user-123", "email": "b@x.com", "username": "bob"}, "id"),
            ({"user_id": "user-456", "email": "test@example.com", "username": "bob"}, "email"),
            ({"user_id": "user-456", "email": "b@x.com", "username": "tester"}, "username"),
        ],
    )
    def test_duplicate_key_rejected_without_side_effects(
        self, store, make_user, overrides, field
    ):
        """A colliding create should fail and leave the store unchanged."""
        store.create(make_user())
        before = store.list_users()

        with pytest.raises(UserAlreadyExistsError) as exc_info:
            store.create(make_user(**overrides))

        assert exc_info.value.field == field
        assert store.list_users() == before
        # No partial index entries for the rejected record
        if field != "email":
            with pytest.raises(UserNotFoundError):
                store.get_by_email("b@x.com")
        if field != "username":
            with pytest.raises(UserNotFoundError):
                store.get_by_username("bob")

    def test_email_is_case_sensitive(self, store, make_user):
        """Emails are stored as supplied, without normalization."""
        store.create(make_user())
        store.create(make_user(user_id="user-456", email="TEST@example.com", username="other"))

        assert store.get_by_email("TEST@example.com").id == "user-456"

    def test_store_keeps_private_copy(self, store, make_user):
        """Mutating the caller's object after create should not leak in."""
        user = make_user()
        store.create(user)
        user.first_name = "Changed"

        assert store.get_by_id("user-123").first_name == "Test"


class TestReads:
    def test_missing_keys_raise_not_found(self, store):
        with pytest.raises(UserNotFoundError):
            store.get_by_id("nope")
        with pytest.raises(UserNotFoundError):
            store.get_by_email("nope@example.com")
        with pytest.raises(UserNotFoundError):
            store.get_by_username("nope")

    def test_returned_records_are_copies(self, store, make_user):
        """Callers cannot mutate stored state through a returned record."""
        store.create(make_user())

        user = store.get_by_email("test@example.com")
        user.is_active = False
        user.email = "hacked@example.com"

        fresh = store.get_by_id("user-123")
        assert fresh.is_active is True
        assert fresh.email == "test@example.com"

    def test_list_users_snapshot(self, store, make_user):
        store.create(make_user())
        store.create(make_user(user_id="user-456", email="b@x.com", username="bob"))

        users = store.list_users()
        assert sorted(u.id for u in users) == ["user-123", "user-456"]

        users[0].username = "mutated"
        assert {u.username for u in store.list_users()} == {"tester", "bob"}

    def test_list_users_empty(self, store):
        assert store.list_users() == []


class TestUpdate:
    def test_update_missing_user(self, store, make_user):
        with pytest.raises(UserNotFoundError):
            store.update(make_user())

    def test_update_retargets_indexes(self, store, make_user):
        """Changing email and username should move both index entries."""
        store.create(make_user())
        user = store.get_by_id("user-123")

        store.update(user.model_copy(update={"email": "new@example.com", "username": "renamed"}))

        assert store.get_by_email("new@example.com").id == "user-123"
        assert store.get_by_username("renamed").id == "user-123"
        with pytest.raises(UserNotFoundError):
            store.get_by_email("test@example.com")
        with pytest.raises(UserNotFoundError):
            store.get_by_username("tester")

    def test_old_keys_become_available(self, store, make_user):
        store.create(make_user())
        user = store.get_by_id("user-123")
        store.update(user.model_copy(update={"email": "new@example.com"}))

        store.create(make_user(user_id="user-456", username="other"))
        assert store.get_by_email("test@example.com").id == "user-456"

    def test_update_collision_leaves_store_unchanged(self, store, make_user):
        """A rename onto another user's username must not touch the email index."""
        store.create(make_user())
        store.create(make_user(user_id="user-456", email="b@x.com", username="bob"))
        user = store.get_by_id("user-123")

        with pytest.raises(UserAlreadyExistsError) as exc_info:
            store.update(
                user.model_copy(update={"email": "fresh@example.com", "username": "bob"})
            )

        assert exc_info.value.field == "username"
        assert store.get_by_email("test@example.com").id == "user-123"
        assert store.get_by_username("tester").id == "user-123"
        with pytest.raises(UserNotFoundError):
            store.get_by_email("fresh@example.com")

    def test_update_email_collision(self, store, make_user):
        store.create(make_user())
        store.create(make_user(user_id="user-456", email="b@x.com", username="bob"))
        user = store.get_by_id("user-123")

        with pytest.raises(UserAlreadyExistsError) as exc_info:
            store.update(user.model_copy(update={"email": "b@x.com"}))
        assert exc_info.value.field == "email"

    def test_update_bumps_updated_at_and_keeps_created_at(self, clock, make_user):
        store = InMemoryUserStore(clock=clock)
        store.create(make_user())
        created = clock.now
        clock.advance(timedelta(minutes=5))

        user = store.get_by_id("user-123")
        store.update(user.model_copy(update={"first_name": "Renamed", "created_at": None}))

        updated = store.get_by_id("user-123")
        assert updated.first_name == "Renamed"
        assert updated.created_at == created
        assert updated.updated_at == created + timedelta(minutes=5)

    def test_update_can_deactivate(self, store, make_user):
        store.create(make_user())
        user = store.get_by_id("user-123")

        store.update(user.model_copy(update={"is_active": False}))
        assert store.get_by_id("user-123").is_active is False


class TestDelete:
    def test_delete_removes_record_and_indexes(self, store, make_user):
        store.create(make_user())
        store.delete("user-123")

        with pytest.raises(UserNotFoundError):
            store.get_by_id("user-123")
        with pytest.raises(UserNotFoundError):
            store.get_by_email("test@example.com")
        with pytest.raises(UserNotFoundError):
            store.get_by_username("tester")

        # Keys are free again
        store.create(make_user(user_id="user-456"))

    def test_delete_missing_user(self, store):
        with pytest.raises(UserNotFoundError):
            store.delete("nope")


class TestConcurrency:
    def test_concurrent_distinct_creates_all_succeed(self, store, make_user):
        n = 50

        def create(i: int) -> None:
            store.create(
                make_user(user_id=f"user-{i}", email=f"u{i}@example.com", username=f"user{i}")
            )

        with ThreadPoolExecutor(max_workers=16) as pool:
            list(pool.map(create, range(n)))

        assert len(store.list_users()) == n
        for i in range(n):
            assert store.get_by_email(f"u{i}@example.com").id == f"user-{i}"
            assert store.get_by_username(f"user{i}").id == f"user-{i}"

    def test_concurrent_same_email_exactly_one_wins(self, store, make_user):
        n = 50
        barrier = threading.Barrier(n)

        def create(i: int) -> bool:
            barrier.wait()
            try:
                store.create(
                    make_user(user_id=f"user-{i}", email="same@example.com", username=f"user{i}")
                )
            except UserAlreadyExistsError:
                return False
            return True

        with ThreadPoolExecutor(max_workers=n) as pool:
            results = list(pool.map(create, range(n)))

        assert results.count(True) == 1
        assert results.count(False) == n - 1
        assert len(store.list_users()) == 1
        winner = store.get_by_email("same@example.com")
        assert store.get_by_username(winner.username).id == winner.id

    def test_readers_never_see_half_renamed_user(self, store, make_user):
        """Under the read lock the indexes always agree with the records."""
        store.create(make_user(email="a@example.com", username="alpha"))
        stop = threading.Event()
        inconsistencies = []

        def writer() -> None:
            names = [("b@example.com", "beta"), ("a@example.com", "alpha")]
            i = 0
            while not stop.is_set():
                email, username = names[i % 2]
                user = store.get_by_id("user-123")
                store.update(user.model_copy(update={"email": email, "username": username}))
                i += 1

        def reader() -> None:
            for _ in range(500):
                with store._lock.read_locked():
                    users = store._users
                    if len(store._email_index) != len(users) or len(store._username_index) != len(users):
                        inconsistencies.append("size")
                    for email, user_id in store._email_index.items():
                        if users[user_id].email != email:
                            inconsistencies.append(email)
                    for username, user_id in store._username_index.items():
                        if users[user_id].username != username:
                            inconsistencies.append(username)

        writer_thread = threading.Thread(target=writer)
        writer_thread.start()
        try:
            with ThreadPoolExecutor(max_workers=4) as pool:
                list(pool.map(lambda _: reader(), range(4)))
        finally:
            stop.set()
            writer_thread.join()

        assert inconsistencies == []
