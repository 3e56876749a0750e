import logging
import uuid

from ...database.repositories.entity_store import EntityStore
from ...database.repositories.products_repo import Product, ProductsRepo
from ...errors import NotFound, Result
from ..uniqueness import check_product

_log = logging.getLogger(__name__)


class ProductController:
    """Product master data: add / edit with case-insensitive name uniqueness."""

    def __init__(self, store: EntityStore, tenant_id: str):
        self.tenant_id = tenant_id
        self.repo = ProductsRepo(store, tenant_id)

    def list_products(self) -> list[Product]:
        return self.repo.list_products()

    def find_by_name(self, name: str) -> Product | None:
        return self.repo.find_by_name(name)

    def add_product(
        self,
        name: str,
        category: str = "",
        unit: str = "",
        default_sell_price: float = 0.0,
    ) -> Result[Product]:
        name = name.strip()
        dup = check_product(name, self.repo.list_products())
        if dup is not None:
            _log.info("tenant %s: product rejected: %s", self.tenant_id, dup)
            return Result.rejected(dup)

        product = Product(
            id=str(uuid.uuid4()),
            name=name,
            category=category,
            unit=unit,
            default_sell_price=float(default_sell_price),
        )
        self.repo.append(product)
        _log.info("tenant %s: product %r added", self.tenant_id, product.name)
        return Result.accepted(product)

    def update_product(
        self,
        product_id: str,
        name: str,
        category: str = "",
        unit: str = "",
        default_sell_price: float = 0.0,
    ) -> Result[Product]:
        """
        Edit in place. Sales and receipts keep the old name: history is linked
        by name value and is not rewritten on rename.
        """
        name = name.strip()
        existing = self.repo.list_products()
        if not any(p.id == product_id for p in existing):
            return Result.rejected(NotFound(self.repo.collection, product_id))

        dup = check_product(name, existing, exclude_id=product_id)
        if dup is not None:
            _log.info("tenant %s: product edit rejected: %s", self.tenant_id, dup)
            return Result.rejected(dup)

        product = Product(
            id=product_id,
            name=name,
            category=category,
            unit=unit,
            default_sell_price=float(default_sell_price),
        )
        self.repo.replace(product_id, product)
        _log.info("tenant %s: product %s updated", self.tenant_id, product_id)
        return Result.accepted(product)
