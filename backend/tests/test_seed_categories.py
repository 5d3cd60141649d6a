from sqlalchemy.orm import sessionmaker

from storefront.models import Category
from storefront.scripts import seed_categories


def test_seed_is_repeatable(engine, db_session, monkeypatch):
    monkeypatch.setattr(seed_categories, "SessionLocal", sessionmaker(bind=engine))
    monkeypatch.setattr(seed_categories, "create_tables", lambda: None)

    assert seed_categories.seed_categories(["Books", "Garden"]) == 2
    assert seed_categories.seed_categories(["Books", "Garden", "Music"]) == 3
    names = [c.name for c in db_session.query(Category).order_by(Category.id)]
    assert names == ["Books", "Garden", "Music"]


def test_seed_defaults(engine, db_session, monkeypatch):
    monkeypatch.setattr(seed_categories, "SessionLocal", sessionmaker(bind=engine))
    monkeypatch.setattr(seed_categories, "create_tables", lambda: None)

    seed_categories.seed_categories()
    assert db_session.query(Category).count() == len(seed_categories.DEFAULT_CATEGORIES)
