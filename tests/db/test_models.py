from sqlalchemy import inspect

from sales_api.db.models import Category, Sale


def test_models_join_by_foreign_key_only():
    assert not inspect(Category).relationships
    assert not inspect(Sale).relationships
    assert [fk.target_fullname for fk in Sale.__table__.c.category_id.foreign_keys] == ["categories.id"]


def test_sale_created_at_defaults_to_application_clock():
    column = Sale.__table__.c.created_at

    assert column.default is not None
    assert column.server_default is not None
