import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from .core import ProductIn, ProductUpdate, deleted_message
from .exceptions import ProductNotFound
from .models import Product

# In-memory product store. One lock guards both the id counter and the
# collection; callers only ever get copies of the stored records.

logger = logging.getLogger(__name__)

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

class ProductStore:
    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._products: Dict[int, Product] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        self._clock = clock or _utcnow

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        with self._lock:
            return product_id in self._products

    def _get(self, product_id: int) -> Product:
        product = self._products.get(product_id)
        if product is None:
            logger.debug("product %s not found", product_id)
            raise ProductNotFound(product_id)
        return product

    def create(self, payload: ProductIn) -> Product:
        with self._lock:
            product_id = self._next_id
            self._next_id += 1
            now = self._clock()
            product = Product(
                id=product_id,
                name=payload.name,
                description=payload.description,
                price=payload.price,
                stock=payload.stock,
                created_at=now,
                updated_at=now,
            )
            self._products[product_id] = product
        logger.info("created product %s (%s)", product_id, product.name)
        return product.model_copy()

    def find_all(self) -> List[Product]:
        # dicts keep insertion order, which is also ascending id order
        with self._lock:
            return [p.model_copy() for p in self._products.values()]

    def find_one(self, product_id: int) -> Product:
        with self._lock:
            return self._get(product_id).model_copy()

    def update(self, product_id: int, payload: ProductUpdate) -> Product:
        changes = payload.changes()
        with self._lock:
            current = self._get(product_id)
            # never move updated_at backwards, even if the clock does
            updated_at = max(self._clock(), current.updated_at)
            product = current.model_copy(update={**changes, "updated_at": updated_at})
            self._products[product_id] = product
        logger.info("updated product %s fields=%s", product_id, sorted(changes))
        return product.model_copy()

    def remove(self, product_id: int) -> str:
        with self._lock:
            self._get(product_id)
            del self._products[product_id]
        logger.info("deleted product %s", product_id)
        return deleted_message(product_id)
