"""
Version rules that tie a release range to its platform set.

A rule pairs a PEP 440 specifier string (for example ``">=1.14,<1.15"``) with
the platform set of the release it covers. Rules are parsed eagerly so that a
malformed built-in rule fails at import instead of on first lookup.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import Version

from goxtargets.core.exceptions import InvalidConstraintError, RegistryGapError
from goxtargets.core.platform import PlatformSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VersionedRule:
    """A version range and the platform set that applies inside it."""

    constraint: str
    """Comma-separated specifier clauses, all of which must hold"""

    platforms: PlatformSet
    """Platform set returned when the constraint matches"""

    specifier: SpecifierSet = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Parse the constraint.

        Raises:
            InvalidConstraintError: If the constraint is empty or malformed
        """
        try:
            specifier = SpecifierSet(self.constraint)
        except InvalidSpecifier as e:
            raise InvalidConstraintError(self.constraint, str(e)) from e

        if len(specifier) == 0:
            raise InvalidConstraintError(self.constraint, "no clauses")

        object.__setattr__(self, "specifier", specifier)

    def matches(self, version: Version) -> bool:
        """Check whether ``version`` satisfies every clause of the rule."""
        return self.specifier.contains(version, prereleases=True)

    def bounds(self) -> Tuple[Optional[Version], Optional[Version]]:
        """
        Get the inclusive lower and exclusive upper bound of the rule.

        Returns:
            Tuple of (lower, upper); either may be None when unbounded

        Raises:
            RegistryGapError: If the rule uses clauses other than a single
                '>=' and a single '<'
        """
        lower: Optional[Version] = None
        upper: Optional[Version] = None

        for clause in self.specifier:
            if clause.operator == ">=" and lower is None:
                lower = Version(clause.version)
            elif clause.operator == "<" and upper is None:
                upper = Version(clause.version)
            else:
                raise RegistryGapError(
                    f"Unsupported clause '{clause}' in rule {self.constraint!r}: "
                    f"rules may only use one '>=' and one '<' clause"
                )

        return lower, upper


def validate_rules(rules: Sequence[VersionedRule]) -> None:
    """
    Check that rules cover the version line without gaps or overlaps.

    The first rule must have no lower bound. Each later rule must start
    exactly where the previous one ends, and only the last rule may be
    unbounded above.

    Args:
        rules: Rules ordered from the oldest release to the newest

    Raises:
        RegistryGapError: If the ranges are not contiguous
    """
    previous_upper: Optional[Version] = None

    for index, rule in enumerate(rules):
        lower, upper = rule.bounds()

        if index == 0:
            if lower is not None:
                raise RegistryGapError(
                    f"First rule {rule.constraint!r} must not have a lower bound"
                )
        elif previous_upper is None:
            raise RegistryGapError(
                f"Rule {rule.constraint!r} follows an unbounded rule"
            )
        elif lower != previous_upper:
            raise RegistryGapError(
                f"Rule {rule.constraint!r} does not start at {previous_upper}"
            )

        if lower is not None and upper is not None and lower >= upper:
            raise RegistryGapError(f"Rule {rule.constraint!r} is an empty range")

        previous_upper = upper

    logger.debug(f"Validated {len(rules)} version rules")


__all__ = ["VersionedRule", "validate_rules"]
