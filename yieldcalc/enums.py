"""
Enum Definitions Module.

Constant sets of values for the yield model family and the sweep axes.
"""
from enum import Enum


class YieldModel(Enum):
    """The closed-form yield models supported by the calculator."""
    POISSON = "poisson"
    MURPHY = "murphy"
    NEGATIVE_BINOMIAL = "nb"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @classmethod
    def values(cls) -> list[str]:
        """Returns the string values of all enum members."""
        return [item.value for item in cls]

    @classmethod
    def parse(cls, value) -> "YieldModel":
        """
        Resolves a member from a member, its id ("nb") or its label
        ("Neg. Binomial"), case-insensitively. Returns None when nothing matches.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        for item in cls:
            if key in (item.value, item.name.lower(), item.label.lower()):
                return item
        return None


_LABELS = {
    YieldModel.POISSON: "Poisson",
    YieldModel.MURPHY: "Murphy",
    YieldModel.NEGATIVE_BINOMIAL: "Neg. Binomial",
}

_DESCRIPTIONS = {
    YieldModel.POISSON: "Assumes defects are distributed randomly. Best for low defect densities.",
    YieldModel.MURPHY: "Accounts for variable defect density using an approximate mathematical model.",
    YieldModel.NEGATIVE_BINOMIAL: "Negative Binomial handles defect clustering (α), common in modern fabs.",
}


class SweepAxis(Enum):
    """Parameters a cost curve can be swept over."""
    DEFECT_DENSITY = "defect_density"
