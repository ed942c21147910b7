# app/exceptions.py
"""Errors raised by the product store.

The HTTP layer translates these into responses; the store itself never
recovers from them.
"""


class ProductNotFound(Exception):
    """No product is stored under the requested id."""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product with ID {product_id} not found")
