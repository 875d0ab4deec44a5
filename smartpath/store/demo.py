# smartpath/store/demo.py
from typing import List

from .basket import Basket, Product
from .floor_plan import FloorPlan, Shelf


def aisle_floor_plan(
    n_cols: int = 2,
    n_rows: int = 3,
    shelf_width: float = 4.0,
    shelf_height: float = 8.0,
    aisle: float = 4.0,
    name: str = "Mercadona",
) -> FloorPlan:
    """
    Tienda regular: n_cols columnas x n_rows filas de estanterías separadas por
    pasillos de ancho `aisle` (también contra las paredes).
    Estanterías nombradas A1, A2, ... (letra = columna, número = fila).
    """
    assert 1 <= n_cols <= 26, "n_cols debe estar entre 1 y 26"
    assert n_rows >= 1, "n_rows debe ser >= 1"
    shelves: List[Shelf] = []
    for c in range(n_cols):
        x = aisle + c * (shelf_width + aisle)
        for r in range(n_rows):
            y = aisle + r * (shelf_height + aisle)
            sid = f"{chr(ord('A') + c)}{r + 1}"
            shelves.append(Shelf(shelf_id=sid, x=x, y=y, width=shelf_width, height=shelf_height, name=sid))
    return FloorPlan(
        width=aisle + n_cols * (shelf_width + aisle),
        height=aisle + n_rows * (shelf_height + aisle),
        shelves=tuple(shelves),
        name=name,
    )


def demo_floor_plan() -> FloorPlan:
    """Plano de demo 20 x 40: columnas x=4 y x=12, filas y=4, 16, 28 (4 x 8 cada una)."""
    return aisle_floor_plan()


def demo_basket() -> Basket:
    return Basket(products=[
        Product("leche", "Leche entera 1L", 1.19),
        Product("pan", "Pan barra", 0.75),
        Product("huevos", "Huevos M (12u)", 2.10),
        Product("aceite", "Aceite de oliva 1L", 7.49),
        Product("pasta", "Pasta espagueti 500g", 0.99),
    ])
