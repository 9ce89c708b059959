PRODUCT_TABLE = "Product"
MIGRATIONS_TABLE = "schema_migrations"

API_PREFIX = "/api/Product"

# (name, price, quantity, description); inserted in order so ids come out 1..3
SEED_PRODUCTS = (
    ("Coke", 3, 100, "Beverage"),
    ("Red Bull", 3, 100, "Beverage"),
    ("Vodka", 10, 100, "Beverage"),
)

# Integer columns are 32-bit; wider values are rejected as bad input.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
