# cafenet/services/access_guard.py
from dataclasses import dataclass
from typing import Iterable, Union

from cafenet.domain.schemas import Role, Session

LOGIN_ROUTE = "/login"


@dataclass(frozen=True)
class Allow:
    session: Session


@dataclass(frozen=True)
class DenyRedirect:
    target: str = LOGIN_ROUTE


Decision = Union[Allow, DenyRedirect]


def authorize(session: Session | None, required_roles: Iterable[Role | str] | None = None) -> Decision:
    """
    Czysta decyzja: render czy redirect.
    Brak sesji albo rola spoza required_roles -> DenyRedirect(login).
    Puste required_roles -> wystarczy dowolna sesja.
    """
    if session is None:
        return DenyRedirect(LOGIN_ROUTE)

    allowed = frozenset(Role(r) for r in (required_roles or ()))
    if allowed and session.role not in allowed:
        return DenyRedirect(LOGIN_ROUTE)

    return Allow(session)


def landing_route(role: Role) -> str:
    match role:
        case Role.ADMIN:
            return "/admin"
        case Role.STAFF:
            return "/staff"
        case Role.CUSTOMER:
            return "/customer"
    raise ValueError(f"Unknown role: {role!r}")
