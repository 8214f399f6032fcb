from pydantic import BaseModel


class HabitOut(BaseModel):
    id: int
    name: str
    is_completed_today: int

    class Config:
        from_attributes = True


class HabitAddedOut(HabitOut):
    success: bool = True


class HabitToggledOut(BaseModel):
    success: bool = True
    id: int
    completed: int


class HabitDeletedOut(BaseModel):
    success: bool = True
    id: int


class ErrorOut(BaseModel):
    error: str
