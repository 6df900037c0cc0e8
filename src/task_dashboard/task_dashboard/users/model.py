from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee as identified across tasks, attendance and KPI.

    ``uid`` is the auth identifier, ``record_id`` the storage id; either may be
    empty. The email is compared case-insensitively.
    """

    uid: str = ""
    record_id: str = ""
    email: str = ""
    name: str = ""
    role: Role = Role.EMPLOYEE

    @property
    def employee_id(self) -> str:
        """Primary key used for attendance and KPI lookups."""
        return self.uid or self.record_id or self.email

    @property
    def email_key(self) -> str:
        return self.email.strip().lower()

    @property
    def id_keys(self) -> frozenset:
        return frozenset(k for k in (self.uid, self.record_id, self.employee_id) if k)

    @property
    def has_identity(self) -> bool:
        return bool(self.uid or self.record_id or self.email_key)

    @property
    def display_name(self) -> str:
        return self.name or self.email or "Member"

    def matches(self, other_id: str = "", other_email: str = "") -> bool:
        """True when the id matches any of ours or the email matches ours."""

        if other_id and other_id in self.id_keys:
            return True
        email = (other_email or "").strip().lower()
        return bool(email and self.email_key and email == self.email_key)
