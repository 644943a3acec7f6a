"""User Store — tests for id assignment, trimming, uniqueness and lifecycle.

Tests cover:
    - Seed data: two users, ids 1 and 2
    - create assigns increasing, never-reused ids, trims, activates, stamps UTC
    - Email uniqueness is case-insensitive on create and update
    - update keeps id, timestamp and list position
    - delete returns False for unknown ids, ids are not reissued
    - Concurrent creates never share an id
"""

import threading
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from crud_api.core.domain_types import UserId
from crud_api.core.errors import EmailConflictError
from crud_api.infrastructure.user_store import UserStore


def _create_body(first="Al", last="Ng", email="al@x.com"):
    return SimpleNamespace(first_name=first, last_name=last, email=email)


def _update_body(first="Al", last="Ng", email="al@x.com", is_active=True):
    return SimpleNamespace(
        first_name=first, last_name=last, email=email, is_active=is_active,
    )


@pytest.fixture
def store():
    return UserStore.with_seed_data()


# ─── seed / list / get ──────────────────────────────────────────

def test_seed_store_has_two_users(store):
    users = store.list()
    assert [u.id for u in users] == [1, 2]
    assert users[0].email == "kevin@example.com"
    assert users[1].email == "jane@example.com"
    assert store.count() == 2


def test_empty_store_starts_ids_at_one():
    store = UserStore()
    assert store.list() == []
    assert store.create(_create_body()).id == 1


def test_get_by_id_returns_none_for_unknown_id(store):
    assert store.get_by_id(UserId(99)) is None


def test_list_returns_a_copy(store):
    users = store.list()
    users.clear()
    assert store.count() == 2


# ─── create ─────────────────────────────────────────────────────

def test_create_assigns_next_id_and_defaults(store):
    before = datetime.now(timezone.utc)
    user = store.create(_create_body())
    assert user.id == 3
    assert user.is_active is True
    assert user.created_on_utc >= before
    assert user.created_on_utc.tzinfo is not None
    assert store.get_by_id(UserId(3)) == user


def test_create_trims_names_and_email(store):
    user = store.create(_create_body(first="  Al ", last=" Ng  ", email=" al@x.com "))
    assert (user.first_name, user.last_name, user.email) == ("Al", "Ng", "al@x.com")


def test_create_rejects_email_differing_only_by_case(store):
    store.create(_create_body(email="al@x.com"))
    with pytest.raises(EmailConflictError):
        store.create(_create_body(email="AL@X.COM"))
    assert store.count() == 3


def test_create_conflicts_with_seeded_email(store):
    with pytest.raises(EmailConflictError):
        store.create(_create_body(email="  Kevin@Example.com "))


def test_failed_create_does_not_consume_an_id(store):
    with pytest.raises(EmailConflictError):
        store.create(_create_body(email="jane@example.com"))
    assert store.create(_create_body()).id == 3


def test_create_uses_injected_clock():
    fixed = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
    store = UserStore(clock=lambda: fixed)
    assert store.create(_create_body()).created_on_utc == fixed


# ─── update ─────────────────────────────────────────────────────

def test_update_preserves_id_and_created_timestamp():
    ticks = iter([
        datetime(2026, 1, 1, tzinfo=timezone.utc),
        datetime(2026, 1, 1, tzinfo=timezone.utc) + timedelta(days=1),
    ])
    store = UserStore(clock=lambda: next(ticks))
    original = store.create(_create_body())
    updated = store.update(
        original.id,
        _update_body(first="Bo", last="Li", email="bo@x.com", is_active=False),
    )
    assert updated.id == original.id
    assert updated.created_on_utc == original.created_on_utc
    assert (updated.first_name, updated.last_name, updated.email) == ("Bo", "Li", "bo@x.com")
    assert updated.is_active is False


def test_update_trims_fields(store):
    updated = store.update(UserId(1), _update_body(first=" Kev ", email=" k@x.com "))
    assert updated.first_name == "Kev"
    assert updated.email == "k@x.com"


def test_update_keeps_list_position(store):
    store.update(UserId(1), _update_body(email="k@x.com"))
    assert [u.id for u in store.list()] == [1, 2]


def test_update_unknown_id_returns_none(store):
    assert store.update(UserId(42), _update_body()) is None


def test_update_may_keep_own_email_with_different_case(store):
    updated = store.update(UserId(1), _update_body(email="KEVIN@example.com"))
    assert updated.email == "KEVIN@example.com"


def test_update_rejects_email_of_another_user(store):
    with pytest.raises(EmailConflictError):
        store.update(UserId(1), _update_body(email="Jane@Example.com"))
    assert store.get_by_id(UserId(1)).email == "kevin@example.com"


# ─── delete ─────────────────────────────────────────────────────

def test_delete_removes_user(store):
    assert store.delete(UserId(2)) is True
    assert store.get_by_id(UserId(2)) is None
    assert store.count() == 1


def test_delete_twice_returns_false(store):
    assert store.delete(UserId(2)) is True
    assert store.delete(UserId(2)) is False


def test_deleted_id_is_never_reused(store):
    store.delete(UserId(2))
    assert store.create(_create_body()).id == 3


# ─── concurrency ────────────────────────────────────────────────

def test_concurrent_creates_get_distinct_ids():
    store = UserStore()
    barrier = threading.Barrier(8)

    def worker(n: int):
        barrier.wait()
        for i in range(25):
            store.create(_create_body(email=f"user{n}-{i}@x.com"))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [u.id for u in store.list()]
    assert len(ids) == 200
    assert sorted(ids) == list(range(1, 201))
