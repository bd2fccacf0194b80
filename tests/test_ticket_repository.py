import pytest
from sqlalchemy.exc import IntegrityError

from lotto_verifier.repositories.ticket_repository import TicketRepository
from lotto_verifier.services.number_set import NumberSet


@pytest.fixture()
def session(app):
    session = app.extensions["session_factory"]()
    yield session
    session.rollback()
    session.close()


def test_same_numbers_twice_for_one_user_violate_unique_constraint(session):
    repo = TicketRepository()
    repo.add_many(session, 1, [NumberSet([1, 2, 3, 4, 5, 6])])

    with pytest.raises(IntegrityError):
        repo.add_many(session, 1, [NumberSet([6, 5, 4, 3, 2, 1])])


def test_same_numbers_for_different_users_are_allowed(session):
    repo = TicketRepository()
    repo.add_many(session, 1, [NumberSet([1, 2, 3, 4, 5, 6])])
    repo.add_many(session, 2, [NumberSet([1, 2, 3, 4, 5, 6])])

    assert repo.count_for_user(session, 1) == 1
    assert repo.count_for_user(session, 2) == 1


def test_group_filter_folds_case_beyond_ascii(session):
    repo = TicketRepository()
    repo.add_many(session, 1, [NumberSet([1, 2, 3, 4, 5, 6])], group_name="Straße")
    repo.add_many(session, 1, [NumberSet([7, 8, 9, 10, 11, 12])], group_name="ŻÓŁW")

    assert [t.group_name for t in repo.list_for_user(session, 1, group_name="STRASSE")] == ["Straße"]
    assert [t.group_name for t in repo.list_for_user(session, 1, group_name="żółw")] == ["ŻÓŁW"]
    assert len(repo.list_for_user(session, 1, group_name="   ")) == 2


def test_update_and_delete(session):
    repo = TicketRepository()
    (record,) = repo.add_many(session, 1, [NumberSet([1, 2, 3, 4, 5, 6])])

    updated = repo.update(session, record.id, NumberSet([10, 20, 30, 40, 45, 49]), group_name="x")
    assert updated is not None
    assert updated.numbers == NumberSet([49, 45, 40, 30, 20, 10])
    assert repo.exists_for_user(session, 1, updated.numbers)
    assert not repo.exists_for_user(session, 1, updated.numbers, exclude_id=record.id)

    assert repo.delete(session, record.id) is True
    assert repo.get(session, record.id) is None
    assert repo.delete(session, record.id) is False
    assert repo.update(session, record.id, NumberSet([1, 2, 3, 4, 5, 6])) is None
