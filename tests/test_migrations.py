import unittest

from sqlalchemy import delete, inspect, select

from app.core.constants import MIGRATIONS_TABLE, PRODUCT_TABLE
from app.database import apply_migrations, build_engine, current_version, make_session_factory, reset_database
from app.database.migrations import MIGRATIONS
from app.models.product import Product


class MigrationsTest(unittest.TestCase):
    def setUp(self):
        self.engine = build_engine("sqlite://")
        self.Session = make_session_factory(self.engine)

    def tearDown(self):
        self.engine.dispose()

    def _product_ids(self):
        with self.Session() as db:
            return list(db.execute(select(Product.id).order_by(Product.id)).scalars())

    def test_fresh_database_applies_all_versions(self):
        self.assertEqual(current_version(self.engine), 0)
        applied = apply_migrations(self.engine)

        self.assertEqual(applied, [m.version for m in MIGRATIONS])
        self.assertEqual(current_version(self.engine), MIGRATIONS[-1].version)
        self.assertEqual(self._product_ids(), [1, 2, 3])

    def test_table_uses_entity_name_and_fields(self):
        apply_migrations(self.engine)
        inspector = inspect(self.engine)

        self.assertIn(PRODUCT_TABLE, inspector.get_table_names())
        self.assertIn(MIGRATIONS_TABLE, inspector.get_table_names())
        self.assertNotIn("Products", inspector.get_table_names())
        columns = {column["name"] for column in inspector.get_columns(PRODUCT_TABLE)}
        self.assertEqual(columns, {"id", "name", "quantity", "price", "description"})

    def test_reapplying_is_a_no_op(self):
        apply_migrations(self.engine)
        self.assertEqual(apply_migrations(self.engine), [])
        self.assertEqual(len(self._product_ids()), 3)

    def test_seed_is_not_restored_after_rows_are_deleted(self):
        apply_migrations(self.engine)
        with self.Session() as db:
            db.execute(delete(Product))
            db.commit()

        apply_migrations(self.engine)
        self.assertEqual(self._product_ids(), [])

    def test_deleted_ids_are_not_reused(self):
        apply_migrations(self.engine)
        with self.Session() as db:
            db.delete(db.get(Product, 3))
            db.commit()
            product = Product(name="Sprite", price=2, quantity=50, description="Beverage")
            db.add(product)
            db.commit()
            self.assertEqual(product.id, 4)

    def test_reset_rebuilds_seed_rows(self):
        apply_migrations(self.engine)
        with self.Session() as db:
            db.execute(delete(Product))
            db.add(Product(name="Sprite", price=2, quantity=50, description="Beverage"))
            db.commit()

        with self.assertLogs("app.database.migrations", level="WARNING"):
            applied = reset_database(self.engine)

        self.assertEqual(applied, [m.version for m in MIGRATIONS])
        self.assertEqual(self._product_ids(), [1, 2, 3])


if __name__ == "__main__":
    unittest.main()
