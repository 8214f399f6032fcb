import html
import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Any, NoReturn, Optional

from sqlalchemy import and_, func, select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from habitlog.errors import NotFoundError, StorageError, ValidationError
from habitlog.models import Habit, HabitEntry

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?\d+")
_MAX_ID = 2**63 - 1
_TRUE_STRINGS = {"1", "true", "on", "yes"}
_UPSERT_INSERTS = {
    "sqlite": sqlite_insert,
    "postgresql": postgresql_insert,
}


@dataclass(frozen=True)
class HabitToday:
    id: int
    name: str
    is_completed_today: bool


@dataclass(frozen=True)
class HabitToggle:
    id: int
    completed: bool


def parse_habit_id(raw: Any) -> int:
    """Return ``raw`` as a positive int or raise ``ValidationError``.

    Accepts ints and digit strings (surrounding whitespace allowed) that
    fit a signed 64-bit column; booleans and floats are rejected even
    when they look integral.
    """
    value: Optional[int] = None
    if isinstance(raw, int) and not isinstance(raw, bool):
        value = raw
    elif isinstance(raw, str) and _INT_RE.fullmatch(raw.strip()):
        value = int(raw.strip())

    if value is None or value <= 0 or value > _MAX_ID:
        raise ValidationError("Invalid habit ID")
    return value


def parse_completed(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int):
        return raw == 1
    if isinstance(raw, str):
        return raw.strip().lower() in _TRUE_STRINGS
    return False


def _clean_name(raw: Any) -> str:
    if not isinstance(raw, str) or not raw.strip():
        raise ValidationError("Habit name is required")
    # Same entity for the apostrophe as htmlspecialchars.
    return html.escape(raw.strip(), quote=True).replace("&#x27;", "&#039;")


def _storage_failure(db: Session, what: str, exc: SQLAlchemyError) -> NoReturn:
    db.rollback()
    logger.exception("Failed to %s", what)
    raise StorageError(f"Failed to {what}: {exc}") from exc


def list_habits_with_today(db: Session, today: date) -> list[HabitToday]:
    stmt = (
        select(Habit.id, Habit.name, HabitEntry.is_completed)
        .outerjoin(HabitEntry, and_(HabitEntry.habit_id == Habit.id, HabitEntry.entry_date == today))
        .order_by(Habit.created_at.desc(), Habit.id.desc())
    )
    try:
        rows = db.execute(stmt).all()
    except SQLAlchemyError as exc:
        _storage_failure(db, "load habits", exc)

    # No entry for today means not completed.
    return [HabitToday(id=habit_id, name=name, is_completed_today=bool(done)) for habit_id, name, done in rows]


def add_habit(db: Session, name: Any) -> Habit:
    habit = Habit(name=_clean_name(name))
    try:
        db.add(habit)
        db.commit()
        db.refresh(habit)
    except SQLAlchemyError as exc:
        _storage_failure(db, "add habit", exc)

    logger.info("Added habit %s (%r)", habit.id, habit.name)
    return habit


def _upsert_entry(db: Session, habit_id: int, entry_date: date, completed: bool) -> None:
    insert_fn = _UPSERT_INSERTS.get(db.get_bind().dialect.name)
    if insert_fn is not None:
        stmt = insert_fn(HabitEntry).values(habit_id=habit_id, entry_date=entry_date, is_completed=completed)
        stmt = stmt.on_conflict_do_update(
            index_elements=["habit_id", "entry_date"],
            set_={"is_completed": stmt.excluded.is_completed},
        )
        db.execute(stmt)
        return

    # Not atomic: the unique constraint is what stops a racing duplicate.
    entry = db.scalar(
        select(HabitEntry).where(and_(HabitEntry.habit_id == habit_id, HabitEntry.entry_date == entry_date))
    )
    if entry:
        entry.is_completed = completed
        db.add(entry)
    else:
        db.add(HabitEntry(habit_id=habit_id, entry_date=entry_date, is_completed=completed))


def toggle_habit(db: Session, habit_id: Any, completed: Any, today: date) -> HabitToggle:
    valid_id = parse_habit_id(habit_id)
    is_completed = parse_completed(completed)

    try:
        if db.get(Habit, valid_id) is None:
            raise NotFoundError("Habit not found")
        _upsert_entry(db, valid_id, today, is_completed)
        db.commit()
    except SQLAlchemyError as exc:
        _storage_failure(db, "toggle habit", exc)

    logger.info("Habit %s marked %s for %s", valid_id, "done" if is_completed else "not done", today.isoformat())
    return HabitToggle(id=valid_id, completed=is_completed)


def delete_habit(db: Session, habit_id: Any) -> int:
    valid_id = parse_habit_id(habit_id)

    try:
        habit = db.get(Habit, valid_id)
        if habit is None:
            raise NotFoundError("Habit not found")
        db.delete(habit)
        db.commit()
    except SQLAlchemyError as exc:
        _storage_failure(db, "delete habit", exc)

    logger.info("Deleted habit %s", valid_id)
    return valid_id


def count_entries(db: Session, habit_id: Optional[int] = None) -> int:
    stmt = select(func.count()).select_from(HabitEntry)
    if habit_id is not None:
        stmt = stmt.where(HabitEntry.habit_id == habit_id)
    return db.scalar(stmt) or 0
