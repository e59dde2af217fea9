from dataclasses import asdict, dataclass, field
from typing import List, Optional


@dataclass
class AdminResponse:
    admin_id: str
    name: str
    email: str
    role: str

    def __post_init__(self):
        # Ensure role is always a string, not an enum
        if hasattr(self.role, "value"):
            self.role = self.role.value

    def to_json(self):
        return asdict(self)


@dataclass
class DeleteAdminResponse:
    success: bool
    admin_id: str

    def to_json(self):
        return asdict(self)


@dataclass
class BootstrapResponse:
    success: bool
    already_super_admin: bool = False

    def to_json(self):
        return asdict(self)


@dataclass
class StoreRating:
    """Aggregate written back onto a store document."""

    store_id: str
    rating: float
    total_ratings: int

    def to_json(self):
        return asdict(self)


@dataclass
class TriggerResult:
    """Outcome of a fire-and-forget trigger handler."""

    success: bool
    entity_id: str
    error: Optional[str] = None


@dataclass
class ClaimsSyncReport:
    super_admins: List[str] = field(default_factory=list)
    admins: List[str] = field(default_factory=list)

    def to_json(self):
        return asdict(self)
