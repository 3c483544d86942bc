"""Base unit system foundation for type-safe physical quantities.

This module provides the fundamental Unit class that serves as the abstract
base for all unit types accepted by the geodesic calculator. It implements
the unit family system using automatic ROOT class assignment, so that a
bearing can never be handed in where a distance is expected.

Key Concepts:
- ROOT Class: Each unit family has a root class that defines the family
- IS_FAMILY_ROOT: Boolean flag marking the base unit of each family
- Automatic Assignment: ROOT classes are determined automatically via MRO

Classes:
    Unit: Abstract base class for all unit types with family management.

Example:
    >>> class Length(Unit):
    ...     IS_FAMILY_ROOT = True  # This becomes the ROOT for length units
    >>> class Meter(Length):
    ...     pass  # Automatically gets ROOT = Length
    >>> Meter.ROOT is Length
    True
"""

from __future__ import annotations

from typing import ClassVar


class Unit:
    """Base class for all unit types.

    Concrete unit classes should inherit from UnitFloat rather than
    directly from this class.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Set ROOT to the first ancestor flagged IS_FAMILY_ROOT, or to cls itself."""
        super().__init_subclass__(**kwargs)
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, unit_type: type) -> None:
        """Check that unit_type belongs to the same quantity family as cls.

        Args:
            unit_type: The other type to check compatibility with. Types
                outside the unit system have no family and never match.

        Raises:
            TypeError: If the types belong to different quantity families.
        """
        other_root = getattr(unit_type, "ROOT", None)
        if cls.ROOT is not other_root:
            msg = (
                f"incompatible units: expected {cls.ROOT.__name__}, "
                f"got {unit_type.__name__}"
            )
            raise TypeError(msg)
