class HRDashboardError(Exception):
    """Base error for the dashboard domain."""


class InvalidStatusError(HRDashboardError, ValueError):
    def __init__(self, kind: str, status: str, allowed: tuple[str, ...]):
        self.kind = kind
        self.status = status
        self.allowed = allowed
        super().__init__(f"{kind} status must be one of {', '.join(allowed)}; got {status!r}")


class SeedDataError(HRDashboardError):
    """Seed tables violate a cross-entity invariant."""
