import pytest

from storefront.core.exceptions import ValidationError
from storefront.services.preference_service import preference_service


def test_replace_is_not_a_merge(db_session, user, categories):
    books, electronics, garden = categories
    preference_service.replace_associations(db_session, user.id, [books.id, garden.id])
    assert preference_service.get_associated_ids(db_session, user.id) == {books.id, garden.id}

    preference_service.replace_associations(db_session, user.id, [electronics.id])
    assert preference_service.get_associated_ids(db_session, user.id) == {electronics.id}


def test_replace_with_empty_list_clears(db_session, user, categories):
    preference_service.replace_associations(db_session, user.id, [categories[0].id])
    preference_service.replace_associations(db_session, user.id, [])
    assert preference_service.get_associated_ids(db_session, user.id) == set()


def test_duplicate_ids_collapse(db_session, user, categories):
    cid = categories[1].id
    result = preference_service.replace_associations(db_session, user.id, [cid, cid, cid])
    assert result == {cid}
    assert preference_service.get_associated_ids(db_session, user.id) == {cid}


def test_unknown_category_keeps_previous_set(db_session, user, categories):
    preference_service.replace_associations(db_session, user.id, [categories[0].id])
    with pytest.raises(ValidationError):
        preference_service.replace_associations(db_session, user.id, [categories[1].id, 9999])
    assert preference_service.get_associated_ids(db_session, user.id) == {categories[0].id}


@pytest.mark.parametrize("value", ["1,2", 3, {"ids": [1]}, [1, "2"], [True]])
def test_rejects_non_id_input(db_session, user, categories, value):
    with pytest.raises(ValidationError):
        preference_service.replace_associations(db_session, user.id, value)


def test_failed_write_rolls_back(db_session, user, categories, monkeypatch):
    preference_service.replace_associations(db_session, user.id, [categories[0].id])

    def broken_add_all(rows):
        raise RuntimeError("insert failed")

    monkeypatch.setattr(db_session, "add_all", broken_add_all)
    with pytest.raises(RuntimeError):
        preference_service.replace_associations(db_session, user.id, [categories[2].id])
    monkeypatch.undo()

    assert preference_service.get_associated_ids(db_session, user.id) == {categories[0].id}


def test_list_flags_associated_categories(db_session, user, categories):
    preference_service.replace_associations(db_session, user.id, [categories[1].id])
    rows = preference_service.list_categories_for_user(db_session, user.id)
    assert [(c.name, flag) for c, flag in rows] == [
        ("Books", False),
        ("Electronics", True),
        ("Garden", False),
    ]


def test_associations_are_per_user(db_session, user, categories):
    from storefront.services.account_service import account_service

    other = account_service.register(db_session, "Other", "other@example.com", "pw")
    preference_service.replace_associations(db_session, user.id, [categories[0].id])
    preference_service.replace_associations(db_session, other.id, [categories[2].id])
    assert preference_service.get_associated_ids(db_session, user.id) == {categories[0].id}


def test_create_category_is_idempotent(db_session):
    first = preference_service.create_category(db_session, "Music")
    second = preference_service.create_category(db_session, "Music")
    assert first.id == second.id
