# ABOUTME: Dense type effectiveness chart indexed by integer type IDs.
# ABOUTME: Provides single/dual-type lookups, multiplier constants, and canonical defender pairs.

from collections.abc import Iterator, Mapping, Sequence

# Effectiveness values
SUPER_EFFECTIVE_4X_VALUE = 4.0
SUPER_EFFECTIVE_VALUE = 2.0
NEUTRAL_VALUE = 1.0
RESISTANCE_VALUE = 0.5
DOUBLE_RESISTANCE_VALUE = 0.25
IMMUNITY_VALUE = 0.0

# Every combined multiplier, in export order
MULTIPLIERS: tuple[float, ...] = (
    SUPER_EFFECTIVE_4X_VALUE,
    SUPER_EFFECTIVE_VALUE,
    NEUTRAL_VALUE,
    RESISTANCE_VALUE,
    DOUBLE_RESISTANCE_VALUE,
    IMMUNITY_VALUE,
)

# Buckets listed when planning offensive coverage
RESISTED_BUCKETS: tuple[float, ...] = (DOUBLE_RESISTANCE_VALUE, RESISTANCE_VALUE, NEUTRAL_VALUE)

# Multipliers that explain why a defender is in trouble
WEAKNESS_MULTIPLIERS: tuple[float, ...] = (SUPER_EFFECTIVE_4X_VALUE, SUPER_EFFECTIVE_VALUE)

DefenderCombo = tuple[str, str | None]
"""A defending typing: (type, None) for monotypes, (type1, type2) in catalog order otherwise."""


class TypeChart:
    """Type catalog plus an attacker x defender multiplier matrix.

    Types are assigned dense integer IDs in catalog order, and the matrix is
    stored as ``matrix[attacking_id][defending_id]``. The chart is immutable
    once built.
    """

    def __init__(self, types: Sequence[str], matrix: Sequence[Sequence[float]]) -> None:
        """Build a chart from an ordered catalog and a square multiplier matrix.

        Args:
            types: Ordered type names. Order drives canonical pairs and tie-breaks.
            matrix: Rows per attacking type, columns per defending type, both in `types` order.

        Raises:
            ValueError: If the catalog is empty or has duplicates, the matrix is not
                square over the catalog, or an entry or the product of two entries
                in the same row is not one of MULTIPLIERS.
        """
        if not types:
            raise ValueError("Type catalog must not be empty")

        ids = {type_name: idx for idx, type_name in enumerate(types)}
        if len(ids) != len(types):
            duplicates = sorted({t for t in types if list(types).count(t) > 1})
            raise ValueError(f"Duplicate types in catalog: {', '.join(duplicates)}")

        size = len(types)
        if len(matrix) != size:
            raise ValueError(f"Expected {size} attacking rows, got {len(matrix)}")

        rows: list[tuple[float, ...]] = []
        for atk_id, row in enumerate(matrix):
            if len(row) != size:
                raise ValueError(f"Row for '{types[atk_id]}' has {len(row)} entries, expected {size}")
            values = tuple(float(value) for value in row)
            for def_id, value in enumerate(values):
                if value not in MULTIPLIERS:
                    raise ValueError(f"Invalid multiplier {value} for {types[atk_id]} -> {types[def_id]}")
            # Dual-type defenders multiply two entries of the same row
            for def_id, value in enumerate(values):
                for other_id in range(def_id + 1, size):
                    product = value * values[other_id]
                    if product not in MULTIPLIERS:
                        raise ValueError(
                            f"Invalid multiplier {product} for {types[atk_id]} -> {types[def_id]}/{types[other_id]}"
                        )
            rows.append(values)

        self._types: tuple[str, ...] = tuple(types)
        self._ids: dict[str, int] = ids
        self._matrix: tuple[tuple[float, ...], ...] = tuple(rows)

    @classmethod
    def from_mapping(cls, types: Sequence[str], effectiveness: Mapping[str, Mapping[str, float]]) -> "TypeChart":
        """Build a chart from a nested ``effectiveness[attacking][defending]`` mapping.

        Raises:
            ValueError: If an attacking or defending entry is missing for a catalog type.
        """
        matrix: list[list[float]] = []
        for atk_type in types:
            if atk_type not in effectiveness:
                raise ValueError(f"Missing effectiveness row for '{atk_type}'")
            row = effectiveness[atk_type]
            missing = [def_type for def_type in types if def_type not in row]
            if missing:
                raise ValueError(f"Row for '{atk_type}' is missing: {', '.join(missing)}")
            matrix.append([row[def_type] for def_type in types])
        return cls(types, matrix)

    @property
    def types(self) -> tuple[str, ...]:
        """The ordered type catalog."""
        return self._types

    @property
    def size(self) -> int:
        """Number of types in the catalog."""
        return len(self._types)

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        return f"TypeChart(types={len(self._types)})"

    def index(self, type_name: str) -> int:
        """Return the dense ID of a type.

        Raises:
            KeyError: If the type is not part of the catalog.
        """
        try:
            return self._ids[type_name]
        except KeyError:
            raise KeyError(f"Unknown type '{type_name}'") from None

    def get_effectiveness(self, atk_type: str, def_type: str) -> float:
        """Multiplier of `atk_type` against the single defending type `def_type`."""
        return self._matrix[self.index(atk_type)][self.index(def_type)]

    def pair_effectiveness(self, atk_type: str, def_type1: str, def_type2: str | None = None) -> float:
        """Calculate type effectiveness multiplier against a one- or two-type defender.

        Args:
            atk_type: The attacking type (e.g., "Fire").
            def_type1: The defender's primary type.
            def_type2: The defender's secondary type, or None for monotype.

        Returns:
            Effectiveness multiplier: 0, 0.25, 0.5, 1, 2, or 4.

        Note:
            If def_type1 == def_type2, the multiplier is applied only once
            (e.g., Water vs Fire/Fire = 2x, NOT 4x).
        """
        row = self._matrix[self.index(atk_type)]
        multiplier = row[self.index(def_type1)]

        # Only apply second type if it exists AND is different from the first
        if def_type2 is not None and def_type2 != def_type1:
            multiplier *= row[self.index(def_type2)]

        return multiplier

    def canonical_pairs(self) -> list[DefenderCombo]:
        """Generate every unique defending typing exactly once.

        Returns:
            n + C(n, 2) tuples in row-major catalog order: for each type `t1`,
            first the monotype (t1, None), then (t1, t2) for every later `t2`.
        """
        return [
            (type1, None if i == j else self._types[j])
            for i, type1 in enumerate(self._types)
            for j in range(i, len(self._types))
        ]
