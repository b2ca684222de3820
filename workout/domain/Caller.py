"""Caller identity resolved by the upstream auth gateway."""
from enum import Enum


class Role(str, Enum):
    CLIENT = "client"
    TRAINER = "trainer"
    SUPERADMIN = "superadmin"


class Caller:
    def __init__(self, user_id: str, role: Role):
        self.user_id = user_id
        self.role = role

    @property
    def is_client(self) -> bool:
        return self.role is Role.CLIENT

    def __repr__(self) -> str:
        return f"Caller({self.user_id!r}, {self.role.value})"
