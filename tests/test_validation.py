import unittest

from app.schemas.product import validate_product


def _fields(errors):
    return [error.field for error in errors]


class ValidateProductTest(unittest.TestCase):
    def setUp(self):
        self.valid = {"name": "Sprite", "price": 2, "quantity": 50, "description": "Beverage"}

    def test_valid_payload_has_no_errors(self):
        self.assertEqual(validate_product(self.valid), [])

    def test_description_and_id_are_optional(self):
        self.assertEqual(validate_product({"name": "Sprite", "price": 2, "quantity": 50}), [])

    def test_unknown_keys_are_ignored(self):
        self.assertEqual(validate_product({**self.valid, "colour": "green"}), [])

    def test_non_object_body(self):
        self.assertEqual(_fields(validate_product(None)), ["body"])
        self.assertEqual(_fields(validate_product([self.valid])), ["body"])

    def test_missing_required_fields(self):
        errors = validate_product({"description": "Beverage"})
        self.assertEqual(sorted(_fields(errors)), ["name", "price", "quantity"])

    def test_numeric_fields_are_strict_integers(self):
        self.assertEqual(_fields(validate_product({**self.valid, "quantity": "50"})), ["quantity"])
        self.assertEqual(_fields(validate_product({**self.valid, "price": 2.5})), ["price"])
        self.assertEqual(_fields(validate_product({**self.valid, "price": True})), ["price"])

    def test_negative_values_rejected(self):
        errors = validate_product({**self.valid, "quantity": -1, "price": -3})
        self.assertEqual(sorted(_fields(errors)), ["price", "quantity"])

    def test_values_beyond_32_bit_range_rejected(self):
        errors = validate_product({**self.valid, "quantity": 2**31, "price": 10**20})
        self.assertEqual(sorted(_fields(errors)), ["price", "quantity"])
        self.assertEqual(_fields(validate_product({**self.valid, "id": -(10**20)})), ["id"])

    def test_32_bit_limits_accepted(self):
        self.assertEqual(validate_product({**self.valid, "id": 2**31 - 1, "price": 2**31 - 1}), [])

    def test_id_must_be_integer(self):
        self.assertEqual(_fields(validate_product({**self.valid, "id": "1"})), ["id"])


if __name__ == "__main__":
    unittest.main()
