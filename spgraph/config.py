"""Configuration classes for spgraph path queries."""

from dataclasses import dataclass

from spgraph.types.base import UnreachablePolicy


@dataclass
class QueryConfig:
    """Configuration for the path query functions in `spgraph.paths`."""

    # How an unreachable target is reported to the caller
    unreachable: UnreachablePolicy = UnreachablePolicy.IMPLICIT

    @property
    def raise_on_unreachable(self) -> bool:
        """Return True when unreachable targets must raise `NoPathError`."""
        return self.unreachable == UnreachablePolicy.RAISE


# Global configuration instance
QUERY_CONFIG = QueryConfig()
