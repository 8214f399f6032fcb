import logging
from datetime import date
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from habitlog.api.deps import get_db, get_today
from habitlog.crud import add_habit, delete_habit, list_habits_with_today, toggle_habit
from habitlog.errors import HabitError
from habitlog.schemas import ErrorOut, HabitAddedOut, HabitDeletedOut, HabitOut, HabitToggledOut

logger = logging.getLogger(__name__)

router = APIRouter(tags=["habits"])


class Action(str, Enum):
    GET_HABITS = "get_habits"
    ADD_HABIT = "add_habit"
    TOGGLE_HABIT = "toggle_habit"
    DELETE_HABIT = "delete_habit"


READ_ACTIONS = frozenset({Action.GET_HABITS})

Handler = Callable[[Session, Dict[str, Any], date], Any]


def _get_habits(db: Session, payload: Dict[str, Any], today: date) -> List[Dict[str, Any]]:
    return [
        HabitOut(id=item.id, name=item.name, is_completed_today=int(item.is_completed_today)).model_dump()
        for item in list_habits_with_today(db, today)
    ]


def _add_habit(db: Session, payload: Dict[str, Any], today: date) -> Dict[str, Any]:
    habit = add_habit(db, payload.get("name"))
    return HabitAddedOut(id=habit.id, name=habit.name, is_completed_today=0).model_dump()


def _toggle_habit(db: Session, payload: Dict[str, Any], today: date) -> Dict[str, Any]:
    result = toggle_habit(db, payload.get("id"), payload.get("completed"), today)
    return HabitToggledOut(id=result.id, completed=int(result.completed)).model_dump()


def _delete_habit(db: Session, payload: Dict[str, Any], today: date) -> Dict[str, Any]:
    habit_id = delete_habit(db, payload.get("id"))
    return HabitDeletedOut(id=habit_id).model_dump()


HANDLERS: Dict[Action, Handler] = {
    Action.GET_HABITS: _get_habits,
    Action.ADD_HABIT: _add_habit,
    Action.TOGGLE_HABIT: _toggle_habit,
    Action.DELETE_HABIT: _delete_habit,
}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorOut(error=message).model_dump())


def _parse_action(raw: Any) -> Optional[Action]:
    if not isinstance(raw, str):
        return None
    try:
        return Action(raw)
    except ValueError:
        return None


def _dispatch(action: Action, payload: Dict[str, Any], db: Session, today: date) -> JSONResponse:
    try:
        result = HANDLERS[action](db, payload, today)
    except HabitError as exc:
        if exc.status_code >= 500:
            logger.error("%s failed: %s", action.value, exc.message)
        else:
            logger.info("%s rejected (%s): %s", action.value, exc.status_code, exc.message)
        return _error(exc.status_code, exc.message)
    return JSONResponse(content=result)


async def _json_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        return None


@router.get("/api")
def api_read(
    action: str = "",
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
) -> JSONResponse:
    parsed = _parse_action(action)
    if parsed not in READ_ACTIONS:
        return _error(400, "Invalid action")
    return _dispatch(parsed, {}, db, today)


@router.post("/api")
def api_write(
    payload: Any = Depends(_json_body),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
) -> JSONResponse:
    if not isinstance(payload, dict):
        return _error(400, "Invalid action")
    parsed = _parse_action(payload.get("action"))
    if parsed is None:
        return _error(400, "Invalid action")
    return _dispatch(parsed, payload, db, today)
