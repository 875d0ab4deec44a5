# smartpath/store/basket.py
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from .floor_plan import FloorPlan, Shelf


@dataclass(frozen=True)
class Product:
    product_id: str
    name: str
    price: float = 0.0
    shelf_id: Optional[str] = None   # estantería donde está; la asigna el catálogo

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Product":
        pid = d.get("id", d.get("product_id", d.get("name")))
        return Product(
            product_id=str(pid),
            name=str(d.get("name", pid)),
            price=float(d.get("price", 0.0)),
            shelf_id=d.get("shelf_id"),
        )


@dataclass(frozen=True)
class Basket:
    products: List[Product] = field(default_factory=list)

    def shelf_ids(self) -> List[str]:
        """Estanterías con al menos un producto del carrito (sin repetir, orden de aparición)."""
        return list(dict.fromkeys(p.shelf_id for p in self.products if p.shelf_id is not None))

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Basket":
        return Basket(products=[Product.from_dict(p) for p in (d.get("products") or [])])


def distribute(basket: Basket, plan: FloorPlan) -> Basket:
    """
    Reparto de demo: los productos sin estantería van en round-robin sobre las
    estanterías ordenadas por (x, y); los que ya traen shelf_id se respetan.
    Devuelve un carrito nuevo; sin estanterías, el carrito queda igual.
    """
    if not plan.shelves:
        return basket
    ordered = sorted(plan.shelves, key=lambda s: (s.x, s.y))
    products = []
    i = 0
    for p in basket.products:
        if p.shelf_id is None:
            p = replace(p, shelf_id=ordered[i % len(ordered)].shelf_id)
            i += 1
        products.append(p)
    return Basket(products=products)


def required_shelves(basket: Basket, plan: FloorPlan) -> List[Shelf]:
    """Estanterías del plano (en su orden) que guardan algún producto del carrito."""
    wanted = set(basket.shelf_ids())
    return [s for s in plan.shelves if s.shelf_id in wanted]
