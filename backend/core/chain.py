from dataclasses import dataclass, field
from fastapi import HTTPException
from typing import Any, Callable, Dict, Optional, Union
import logging
import math

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Accepted:
    value: Any = None

@dataclass(frozen=True)
class Rejected:
    status: int
    message: str

Result = Union[Accepted, Rejected]

@dataclass
class RequestState:
    """What a step chain sees of one request: path params, the `data` payload and step outputs"""
    params: Dict[str, str] = field(default_factory=dict)
    data: Dict[str, Any] = field(default_factory=dict)
    locals: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def build(cls, payload: Any = None, **params: str) -> "RequestState":
        # {"data": {...}} envelope; anything else reads as an empty payload
        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            data = {}
        return cls(params=params, data=data)

Step = Callable[[RequestState], Result]

def run_chain(state: RequestState, *steps: Step) -> Result:
    """Run steps in order, stopping at the first rejection"""
    result: Result = Accepted()
    for step in steps:
        result = step(state)
        if isinstance(result, Rejected):
            logger.info("%s rejected request (%s): %s", step.__name__, result.status, result.message)
            return result
    return result

def unwrap(result: Result) -> Any:
    if isinstance(result, Rejected):
        raise HTTPException(status_code=result.status, detail=result.message)
    return result.value

def record_exists(store, param: str, resource: str, key: str) -> Step:
    """Existence check: resolve the path id to a stored record or fail with 404"""
    def exists(state: RequestState) -> Result:
        record_id = state.params[param]
        found = store.find(record_id)
        if found is None:
            return Rejected(404, f"{resource} id not found: {record_id}")
        state.locals[key] = found
        return Accepted(found)
    exists.__name__ = f"{key}_exists"
    return exists

def body_id_matches(param: str, resource: str) -> Step:
    """A body id, when given, must equal the route id"""
    def id_matches(state: RequestState) -> Result:
        route_id = state.params[param]
        body_id = state.data.get("id")
        if not _id_missing(body_id) and body_id != route_id:
            return Rejected(
                400,
                f"{resource} id in the body ({body_id}) does not match {resource.lower()} id in the route ({route_id})",
            )
        return Accepted()
    id_matches.__name__ = f"{resource.lower()}_id_matches"
    return id_matches

def _id_missing(value: Any) -> bool:
    # None, False, "", 0 and NaN; empty lists and objects still count as an id
    if isinstance(value, float) and math.isnan(value):
        return True
    return value is None or value is False or value == "" or (isinstance(value, (int, float)) and value == 0)

def is_text(value: Any) -> bool:
    if not isinstance(value, str) or value == "":
        return False
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        # lone surrogates from \uXXXX escapes
        return False
    return True

def is_positive_number(value: Any, integer: bool = False) -> bool:
    kinds = (int,) if integer else (int, float)
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, kinds):
        return False
    if isinstance(value, float) and not math.isfinite(value):
        return False
    return value > 0

def first_failure(checks) -> Optional[Rejected]:
    for ok, message in checks:
        if not ok():
            return Rejected(400, message)
    return None
