# smartpath/store/floor_plan.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Tuple
import math

Point = Tuple[float, float]  # (x, y) en unidades del plano


class MalformedFloorPlan(ValueError):
    """Plano inválido (dimensiones negativas, coordenadas no finitas, spacing <= 0)."""


def _finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


@dataclass(frozen=True)
class Shelf:
    """
    Huella rectangular de una estantería (solo para colisión).
    Lo que contiene la estantería vive en el carrito/catálogo, no aquí.
    """
    shelf_id: str
    x: float
    y: float
    width: float
    height: float
    name: str = ""

    @property
    def center(self) -> Point:
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)

    def contains(self, p: Point) -> bool:
        # contención inclusiva en los cuatro bordes
        px, py = p
        return (self.x <= px <= self.x + self.width) and (self.y <= py <= self.y + self.height)

    def validate(self) -> None:
        if not _finite(self.x, self.y, self.width, self.height):
            raise MalformedFloorPlan(f"Estantería {self.shelf_id!r} con coordenadas no finitas.")
        if self.width < 0 or self.height < 0:
            raise MalformedFloorPlan(
                f"Estantería {self.shelf_id!r} con dimensiones negativas ({self.width}x{self.height})."
            )

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Shelf":
        sid = d.get("id", d.get("shelf_id"))
        if sid is None:
            raise MalformedFloorPlan(f"Estantería sin 'id': {d}")
        return Shelf(
            shelf_id=str(sid),
            x=float(d["x"]),
            y=float(d["y"]),
            width=float(d["width"]),
            height=float(d["height"]),
            name=str(d.get("name", sid)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.shelf_id,
            "name": self.name,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }


# Una estantería requerida es la misma huella, entregada por el carrito.
RequiredShelf = Shelf


@dataclass(frozen=True)
class FloorPlan:
    """
    Plano rectangular de la tienda con sus obstáculos (una huella por estantería).

    d = {
        "name": str,                   # opcional
        "width": float,
        "height": float,
        "shelves": [{"id", "x", "y", "width", "height", "name"?}, ...]
    }
    """
    width: float
    height: float
    shelves: Tuple[Shelf, ...] = field(default_factory=tuple)
    name: str = ""

    def __post_init__(self):
        # acepta listas por comodidad, pero se guarda como tupla inmutable
        object.__setattr__(self, "shelves", tuple(self.shelves))
        self.validate()

    def validate(self) -> None:
        if not _finite(self.width, self.height):
            raise MalformedFloorPlan("El plano debe tener width/height finitos.")
        if self.width <= 0 or self.height <= 0:
            raise MalformedFloorPlan(f"Dimensiones del plano deben ser > 0 (recibido {self.width}x{self.height}).")
        seen = set()
        for s in self.shelves:
            s.validate()
            if s.shelf_id in seen:
                raise MalformedFloorPlan(f"Identificador de estantería duplicado: {s.shelf_id!r}")
            seen.add(s.shelf_id)

    # --------- consultas ---------
    def shelf(self, shelf_id: str) -> Shelf:
        for s in self.shelves:
            if s.shelf_id == shelf_id:
                return s
        raise KeyError(shelf_id)

    def shelf_ids(self) -> List[str]:
        return [s.shelf_id for s in self.shelves]

    def select(self, shelf_ids: Iterable[str]) -> List[Shelf]:
        """Estanterías con esos ids, en el orden del plano."""
        wanted = set(shelf_ids)
        missing = wanted - set(self.shelf_ids())
        if missing:
            raise KeyError(f"Estanterías desconocidas: {sorted(missing)}")
        return [s for s in self.shelves if s.shelf_id in wanted]

    def is_blocked(self, p: Point) -> bool:
        return any(s.contains(p) for s in self.shelves)

    # --------- (de)serialización ---------
    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "FloorPlan":
        try:
            width = float(d["width"])
            height = float(d["height"])
        except KeyError as e:
            raise MalformedFloorPlan(f"Falta la clave {e.args[0]!r} en el plano.") from e
        shelves = [Shelf.from_dict(s) for s in (d.get("shelves") or [])]
        return FloorPlan(width=width, height=height, shelves=tuple(shelves), name=str(d.get("name", "")))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "width": self.width,
            "height": self.height,
            "shelves": [s.to_dict() for s in self.shelves],
        }
