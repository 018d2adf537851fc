"""Shared fixtures for service tests: an in-memory SQLite record store."""

import datetime

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.models  # noqa: F401  (registers every table on the metadata)
from app.models.measurement import MeasurementEntry
from app.models.user import User
from app.models.workout import Workout

DAY0 = datetime.date(2026, 3, 1)


def day(offset: int) -> datetime.date:
    return DAY0 + datetime.timedelta(days=offset)


@pytest.fixture
def session():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    with Session(engine) as db:
        yield db
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def trainee(session) -> User:
    """Trainee 1: weight 92 before the window, then 90 and 88; two squat workouts."""
    user = User(email="anna@example.com", full_name="Anna", group_names=["morning"], baselines={"weight": 92})
    session.add(user)
    session.commit()
    session.refresh(user)

    session.add_all([
        MeasurementEntry(user_id=user.id, date=day(-20), weight=92),
        MeasurementEntry(user_id=user.id, date=day(1), weight=90, bmi=31.0),
        MeasurementEntry(user_id=user.id, date=day(5), weight=88, bmi=30.4),
        Workout(user_id=user.id, date=day(2), status="completed", sections={
            "exercises": [{"name": "Squat", "sets": [{"weight": 60, "repetitions": 5, "completed": True}]}]}),
        Workout(user_id=user.id, date=day(6), status="completed", sections={
            "part_1": [{"name": "Squat", "sets": [{"weight": 65, "repetitions": 5, "completed": False}]}]}),
        Workout(user_id=user.id, date=day(7), status="active", sections={
            "exercises": [{"name": "Squat", "sets": [{"weight": 200, "repetitions": 1}]}]}),
    ])
    session.commit()
    return user
