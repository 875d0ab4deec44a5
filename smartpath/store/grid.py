# smartpath/store/grid.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Tuple
import math
import numpy as np

from .floor_plan import FloorPlan, MalformedFloorPlan, Point


@dataclass
class GridGraph:
    """
    Rejilla uniforme sobre el plano, direccionada por índice plano:

        nodo (ix, iy)  ->  k = iy * nx + ix  ->  nodes[k] = (ix*spacing, iy*spacing)

    Los nodos dentro de una estantería siguen en `nodes` (para no romper los
    índices) pero no tienen vecinos. La adyacencia es 4-conectada y simétrica.
    """
    nodes: List[Point]
    neighbors: List[List[int]]
    nx: int
    ny: int
    spacing: float
    blocked: List[bool]

    # --------- direccionamiento ---------
    def __len__(self) -> int:
        return len(self.nodes)

    def index_of(self, ix: int, iy: int) -> int:
        if not (0 <= ix < self.nx and 0 <= iy < self.ny):
            raise IndexError(f"({ix}, {iy}) fuera de la rejilla {self.nx}x{self.ny}")
        return iy * self.nx + ix

    def point(self, k: int) -> Point:
        return self.nodes[k]

    def coords(self) -> np.ndarray:
        """Coordenadas como arreglo (n, 2) para búsquedas vectorizadas."""
        return np.asarray(self.nodes, dtype=float).reshape(-1, 2)

    # --------- topología ---------
    def degree(self, k: int) -> int:
        return len(self.neighbors[k])

    def is_walkable(self, k: int) -> bool:
        return len(self.neighbors[k]) > 0

    def walkable_nodes(self) -> List[int]:
        return [k for k, nb in enumerate(self.neighbors) if nb]

    def edges(self) -> Iterable[Tuple[int, int]]:
        """Cada arista no dirigida una sola vez, como (menor, mayor)."""
        for u, nb in enumerate(self.neighbors):
            for v in nb:
                if u < v:
                    yield (u, v)

    def edge_weight(self, u: int, v: int) -> float:
        # distancia euclídea genérica; en rejilla uniforme siempre vale `spacing`
        ax, ay = self.nodes[u]
        bx, by = self.nodes[v]
        return math.hypot(ax - bx, ay - by)


def grid_shape(plan: FloorPlan, spacing: float) -> Tuple[int, int]:
    nx = int(math.floor(plan.width / spacing)) + 1
    ny = int(math.floor(plan.height / spacing)) + 1
    return nx, ny


def build_grid(plan: FloorPlan, spacing: float = 1.0) -> GridGraph:
    """Discretiza el plano, marca los nodos bloqueados y arma la adyacencia 4-vecinos."""
    if not math.isfinite(spacing) or spacing <= 0:
        raise MalformedFloorPlan(f"spacing debe ser finito y > 0 (recibido {spacing}).")
    plan.validate()

    nx, ny = grid_shape(plan, spacing)

    # meshgrid en orden (fila=iy, columna=ix) => ravel da exactamente iy*nx + ix
    gx, gy = np.meshgrid(np.arange(nx) * spacing, np.arange(ny) * spacing)
    xs = gx.ravel()
    ys = gy.ravel()

    blocked = np.zeros(nx * ny, dtype=bool)
    for s in plan.shelves:
        blocked |= (xs >= s.x) & (xs <= s.x + s.width) & (ys >= s.y) & (ys <= s.y + s.height)

    nodes: List[Point] = list(zip(xs.tolist(), ys.tolist()))
    neighbors: List[List[int]] = [[] for _ in range(nx * ny)]

    for iy in range(ny):
        for ix in range(nx):
            k = iy * nx + ix
            if blocked[k]:
                continue
            # derecha
            if ix + 1 < nx:
                kk = k + 1
                if not blocked[kk]:
                    neighbors[k].append(kk)
                    neighbors[kk].append(k)
            # abajo
            if iy + 1 < ny:
                kk = k + nx
                if not blocked[kk]:
                    neighbors[k].append(kk)
                    neighbors[kk].append(k)

    return GridGraph(
        nodes=nodes,
        neighbors=neighbors,
        nx=nx,
        ny=ny,
        spacing=float(spacing),
        blocked=blocked.tolist(),
    )
