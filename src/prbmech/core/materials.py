"""Material presets for the flexible rocker."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Material:
    """Named linear-elastic material.

    Attributes:
        name: Display name.
        E: Young's modulus (Pa).
    """

    name: str
    E: float


MATERIALS: tuple[Material, ...] = (
    Material("Polypropylene", 1.4e9),
    Material("Steel", 207e9),
    Material("Aluminum", 70e9),
    Material("Nylon", 2.8e9),
    Material("Polysilicon", 160e9),
)


def material_names() -> list[str]:
    """Return catalog names in display order."""
    return [m.name for m in MATERIALS]


def get_material(name: str) -> Material:
    """Look up a material by name (case-insensitive).

    Raises:
        KeyError: If the name is not in the catalog.
    """
    key = name.strip().lower()
    for material in MATERIALS:
        if material.name.lower() == key:
            return material
    raise KeyError(f"Unknown material {name!r}; known: {', '.join(material_names())}")
