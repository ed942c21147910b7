#!/usr/bin/env python
from app.config import get_settings
from sdk.pystore import ProductNotFoundError, StoreClient

def main():
    c = StoreClient(base_url=get_settings().base_url)

    # -----------------------------
    # Create products
    # -----------------------------
    print("Creating products...")
    laptop = c.create_product("Laptop", "14 inch, 16GB", 1500, 3)
    mouse = c.create_product("Mouse", "Wireless", 25.5, 10)
    print(laptop)
    print(mouse)

    # -----------------------------
    # List products
    # -----------------------------
    print("\nListing products...")
    print(c.list_products())

    # -----------------------------
    # Partial update
    # -----------------------------
    print("\nDropping the laptop price...")
    print(c.update_product(laptop["id"], price=1399))

    # -----------------------------
    # Delete and look it up again
    # -----------------------------
    print("\nDeleting the mouse...")
    print(c.delete_product(mouse["id"]))
    try:
        c.get_product(mouse["id"])
    except ProductNotFoundError as e:
        print(e.detail)

if __name__ == "__main__":
    main()
