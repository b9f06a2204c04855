"""
Bit grouping: uniform or field-based partitioning of bit strings.

A group spec is either a uniform size, grouping every ``size`` bits from the
least significant end (0 disables grouping), or a colon separated field list
such as ``:6:3:5`` where each number is a fixed field width and at most one
empty field absorbs whatever bits the fixed fields leave over. Fields are
written most significant first.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import re
from dataclasses import dataclass
from typing import Any, Self, Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from .conf import BitsConf
from .errors import ExcessBits, InsufficientBits, InvalidGroupSize, MultipleVariableGroups

logger = logging.getLogger(__name__)

# Field size marking the variable-length field
VARIABLE = None


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class GroupSpec:
    """
    Grouping configuration, read-only once built.

    Attributes:
        size: Uniform group size, 0 for no uniform grouping.
        fields: Field sizes most significant first, VARIABLE for the
            variable-length field. Empty in uniform mode.
        text: Spec as written by the user, for diagnostics.
    """
    size: int = 0
    fields: tuple[int | None, ...] = ()
    text: str = ""

    def __post_init__(self):
        if self.size < 0:
            raise InvalidGroupSize(f"invalid group size: {self.size}", text=self.text or str(self.size))
        if self.size and self.fields:
            raise ValueError("group spec cannot be both uniform and field based")
        if sum(1 for f in self.fields if f is VARIABLE) > 1:
            raise MultipleVariableGroups(f"more than one variable group in {self.text!r}", text=self.text)

    @classmethod
    def uniform(cls, size: int) -> Self:
        """Group every size bits from the least significant end, 0 disables grouping."""
        if isinstance(size, bool) or not isinstance(size, int):
            raise TypeError(f"group size must be an int, but found {type(size).__name__}")
        return cls(size=size, text=str(size))

    @classmethod
    def from_fields(cls, text: str) -> Self:
        """
        Build a field spec from colon separated sizes, most significant first.

        Examples:
            >>> GroupSpec.from_fields(":6:3:5").fields
            (None, 6, 3, 5)
        """
        fields = []
        for part in text.split(":"):
            part = part.strip()
            if not part:
                fields.append(VARIABLE)
            elif re.fullmatch(r"[0-9]+", part) and int(part) > 0:
                fields.append(int(part))
            else:
                raise InvalidGroupSize(f"invalid group size {part!r} in {text!r}", text=text)
        return cls(fields=tuple(fields), text=text)

    @classmethod
    def parse(cls, spec: Any) -> Self:
        """
        Build a GroupSpec from None, an int, a uniform size string or a field spec string.

        Raises:
            TypeError: If spec has an unsupported type.
            InvalidGroupSize: If a size is non-numeric or negative, or a field is zero.
            MultipleVariableGroups: If a field spec has more than one empty field.
        """
        if spec is None:
            return cls()
        if isinstance(spec, GroupSpec):
            return spec
        if isinstance(spec, int) and not isinstance(spec, bool):
            return cls.uniform(spec)
        if isinstance(spec, str):
            if ":" in spec:
                return cls.from_fields(spec)
            if re.fullmatch(r"[0-9]+", spec.strip()):
                return cls.uniform(int(spec))
            raise InvalidGroupSize(f"invalid group size: {spec!r}", text=spec)
        raise TypeError(f"group spec must be an int, str or None, but found {type(spec).__name__}")

    @property
    def is_grouping(self) -> bool:
        return bool(self.fields) or self.size > 0

    @property
    def has_variable(self) -> bool:
        return VARIABLE in self.fields

    @property
    def total(self) -> int:
        """Nominal total: sum of fixed field sizes, or the uniform size."""
        if self.fields:
            return sum(f for f in self.fields if f is not VARIABLE)
        return self.size


# Methods --------------------------------------------------------------------------------------------------------------

def group_bits(bits: str, spec: GroupSpec) -> list[str]:
    """
    Partition a bit string into groups, most significant group first.

    Uniform specs cut from the least significant end, so only the leftmost
    group may be short. Field specs must partition the bits exactly: fixed
    fields take their width, the variable field takes the rest.

    Raises:
        InsufficientBits: If fixed fields need more bits than there are.
        ExcessBits: If bits are left over and the spec has no variable field.

    Examples:
        >>> group_bits("1111000011", GroupSpec.uniform(4))
        ['11', '1100', '0011']
        >>> group_bits("000011000000110111101101", GroupSpec.from_fields(":6:3:5"))
        ['0000110000', '001101', '111', '01101']
    """
    if not spec.is_grouping or not bits:
        return [bits]
    if spec.fields:
        return _group_fields(bits, spec)

    head = len(bits) % spec.size
    groups = [bits[:head]] if head else []
    groups.extend(bits[i:i + spec.size] for i in range(head, len(bits), spec.size))
    return groups


def join_groups(
        groups: Sequence[str],
        color: bool = False,
        *,
        colors: Sequence[str] = BitsConf.GROUP_COLORS,
        reset: str = BitsConf.RESET,
) -> str:
    """
    Join groups for display.

    Plain mode separates groups with one space. Color mode wraps each group in
    alternating colors, starting from the least significant group, with no
    separator at all.
    """
    if not color:
        return " ".join(groups)
    last = len(groups) - 1
    return "".join(
        f"{colors[(last - i) % len(colors)]}{g}{reset}" for i, g in enumerate(groups)
    )


def format_groups(bits: str, spec: GroupSpec, color: bool = False) -> str:
    """Group bits per spec and join them for display."""
    return join_groups(group_bits(bits, spec), color)


# Private methods ------------------------------------------------------------------------------------------------------

def _group_fields(bits: str, spec: GroupSpec) -> list[str]:
    length = len(bits)
    reserved = spec.total
    if reserved > length:
        raise InsufficientBits(
            f"not enough bits for group spec {spec.text!r}: {length} < {reserved}", text=spec.text
        )
    if reserved < length and not spec.has_variable:
        raise ExcessBits(
            f"too many bits for group spec {spec.text!r}: {length} > {reserved}", text=spec.text
        )

    # Cursor walks from the least significant end over fields in reverse order
    groups = []
    end = length
    for size in reversed(spec.fields):
        if size is VARIABLE:
            size = length - reserved
        groups.append(bits[end - size:end])
        end -= size
    groups.reverse()

    logger.debug("grouped %d bits as %s", length, [len(g) for g in groups])
    return [g for g in groups if g]
