"""Request Dependencies — caller identity, role gate and rule-validated bodies.

Invariants:
    - get_current_user never raises: no identity is None
    - require_roles: anonymous callers are always rejected, even with an
      empty allow-list; a non-empty allow-list must contain the caller's role
    - validated_body returns the parsed body unmodified when every rule passes
    - Failures raise TaskForgeError subclasses; the global handler renders them

Design Decisions:
    - Identity is read from request.state.user, set by the authentication
      layer in front of the app; tests override get_current_user
    - Dependency factories (closures) over middleware: rules and roles are
      per-route configuration, visible in the route signature
"""

import json
import logging
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from fastapi import Depends, Request
from pydantic import BaseModel, ValidationError

from taskforge.core.domain_types import CallerIdentity
from taskforge.core.errors import ErrorContext, ForbiddenError, RequestRuleError
from taskforge.core.validation import RuleSet, check_rules

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def get_current_user(request: Request) -> CallerIdentity | None:
    """Caller attached by the authentication layer, or None."""
    return getattr(request.state, "user", None)


def check_role(
    allowed: Sequence[str], identity: CallerIdentity | None,
) -> bool:
    """Pure role check. Empty allow-list means any authenticated caller."""
    if identity is None:
        return False
    return not allowed or identity.role in allowed


def require_roles(
    roles: str | Sequence[str] = (),
) -> Callable[..., CallerIdentity]:
    """Dependency factory: 403 unless the caller passes check_role()."""
    allowed = [roles] if isinstance(roles, str) else list(roles)

    def _gate(
        request: Request,
        identity: CallerIdentity | None = Depends(get_current_user),
    ) -> CallerIdentity:
        if not check_role(allowed, identity):
            logger.warning(
                f"Forbidden on {request.url.path}",
                extra={
                    "path": request.url.path,
                    "user_id": str(identity.id) if identity else None,
                },
            )
            raise ForbiddenError(ErrorContext(
                user_id=str(identity.id) if identity else None,
            ))
        return identity

    return _gate


async def _read_json_object(request: Request) -> dict[str, Any]:
    # ValueError covers both malformed JSON and non-UTF-8 bytes
    raw = await request.body()
    if not raw:
        return {}
    try:
        body = json.loads(raw)
    except ValueError:
        raise RequestRuleError("Request body must be valid JSON")
    return body if isinstance(body, dict) else {}


def validated_body(rules: RuleSet) -> Callable[..., Any]:
    """Dependency factory: run the rule pipeline over the JSON body."""

    async def _validate(request: Request) -> dict[str, Any]:
        body = await _read_json_object(request)
        check_rules(rules, body)
        return body

    return _validate


def parse_body(schema: type[SchemaT], body: dict[str, Any]) -> SchemaT:
    """Coerce an already rule-checked body into a schema, single-message on failure."""
    try:
        return schema.model_validate(body)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(loc) for loc in first["loc"])
        raise RequestRuleError(f"{field}: {first['msg']}" if field else first["msg"])
