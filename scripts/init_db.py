# scripts/init_db.py
"""
Create, drop and seed the Workout Tracker database.

Usage:
    python scripts/init_db.py create
    python scripts/init_db.py drop [--yes]
    python scripts/init_db.py seed

Seeding is idempotent: entries whose name already exists are skipped.
"""

import logging
import os
import sys
from pathlib import Path

# Make the project root importable when run as a script
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy.orm import Session

from config.database import Base, SessionLocal, engine
from config.logging_config import setup_logging
from models import Equipment, Exercise, ExerciseType, Muscle, RoleEnum, User
from repositories import EquipmentRepository, ExerciseRepository, MuscleRepository, UserRepository
from utils.security import hash_password

logger = logging.getLogger("init_db")

# name, measurable, children
BASE_MUSCLES = [
    ("Chest", True, [("Upper chest", False, []), ("Lower chest", False, [])]),
    ("Back", False, [("Latissimus dorsi", False, []), ("Trapezius", False, []), ("Lower back", False, [])]),
    ("Shoulders", True, [("Front deltoid", False, []), ("Side deltoid", False, []), ("Rear deltoid", False, [])]),
    ("Arms", False, [("Biceps", True, []), ("Triceps", False, []), ("Forearms", True, [])]),
    ("Core", False, [("Abs", False, []), ("Obliques", False, [])]),
    ("Legs", False, [("Quadriceps", False, []), ("Hamstrings", False, []), ("Glutes", False, []),
                     ("Thighs", True, []), ("Calves", True, [])]),
    ("Neck", True, []),
    ("Waist", True, []),
]

BASE_EQUIPMENT = ["Barbell", "Dumbbells", "Kettlebell", "Pull-up bar", "Bench", "Cable machine", "Resistance band"]

# name, type, muscles, equipment
BASE_EXERCISES = [
    ("Bench press", ExerciseType.weight_and_reps, ["Chest", "Triceps", "Front deltoid"], ["Barbell", "Bench"]),
    ("Push-up", ExerciseType.reps, ["Chest", "Triceps"], []),
    ("Pull-up", ExerciseType.reps, ["Latissimus dorsi", "Biceps"], ["Pull-up bar"]),
    ("Deadlift", ExerciseType.weight_and_reps, ["Lower back", "Hamstrings", "Glutes"], ["Barbell"]),
    ("Squat", ExerciseType.weight_and_reps, ["Quadriceps", "Glutes"], ["Barbell"]),
    ("Overhead press", ExerciseType.weight_and_reps, ["Front deltoid", "Triceps"], ["Barbell"]),
    ("Dumbbell curl", ExerciseType.weight_and_reps, ["Biceps"], ["Dumbbells"]),
    ("Plank", ExerciseType.time, ["Abs", "Obliques"], []),
    ("Farmer's walk", ExerciseType.weight_and_time, ["Forearms", "Trapezius"], ["Dumbbells"]),
]


# ============================================================
# Schema
# ============================================================

def init_db():
    """Create every table."""
    logger.info("Creating tables...")
    Base.metadata.create_all(bind=engine)
    for table_name in sorted(Base.metadata.tables.keys()):
        logger.info("  - %s", table_name)


def drop_db(assume_yes: bool = False):
    """Drop every table (development only)."""
    if not assume_yes:
        answer = input("Drop ALL tables? (y/n): ")
        if answer.lower() != "y":
            logger.info("Cancelled")
            return

    logger.info("Dropping tables...")
    Base.metadata.drop_all(bind=engine)
    logger.info("Tables dropped")


# ============================================================
# Seed data
# ============================================================

def seed_admin(db: Session) -> User | None:
    user_name = os.getenv("ADMIN_USER_NAME")
    email = os.getenv("ADMIN_EMAIL")
    password = os.getenv("ADMIN_PASSWORD")
    if not (user_name and email and password):
        logger.warning("ADMIN_USER_NAME, ADMIN_EMAIL or ADMIN_PASSWORD not set, admin not seeded")
        return None

    users = UserRepository(db)
    admin = users.get_by_user_name(user_name)
    if admin is not None:
        return admin
    logger.info("Seeding admin '%s'", user_name)
    return users.add(User(
        user_name=user_name,
        email=email,
        password_hash=hash_password(password),
        role=RoleEnum.admin,
    ))


def seed_muscles(db: Session, muscles=BASE_MUSCLES, parent: Muscle | None = None) -> None:
    repository = MuscleRepository(db)
    for name, is_measurable, children in muscles:
        muscle = repository.get_by_name(name)
        if muscle is None:
            muscle = repository.add(Muscle(
                name=name,
                is_measurable=is_measurable,
                parent_muscle_id=parent.id if parent else None,
            ))
        seed_muscles(db, children, muscle)


def seed_equipment(db: Session) -> None:
    repository = EquipmentRepository(db)
    missing = [name for name in BASE_EQUIPMENT if not repository.exists_by_name(name)]
    repository.add_range(Equipment(name=name) for name in missing)


def seed_exercises(db: Session) -> None:
    exercises = ExerciseRepository(db)
    muscles = MuscleRepository(db)
    equipment = EquipmentRepository(db)

    for name, exercise_type, muscle_names, equipment_names in BASE_EXERCISES:
        if exercises.exists_by_name(name):
            continue
        exercise = Exercise(name=name, type=exercise_type)
        exercise.working_muscles = [m for m in (muscles.get_by_name(n) for n in muscle_names) if m is not None]
        exercise.equipments = [e for e in (equipment.get_by_name(n) for n in equipment_names) if e is not None]
        exercises.add(exercise)


def seed_db(db: Session) -> None:
    seed_admin(db)
    seed_muscles(db)
    seed_equipment(db)
    seed_exercises(db)
    logger.info("Seed data in place")


if __name__ == "__main__":
    import argparse

    setup_logging()

    parser = argparse.ArgumentParser(description="Database management")
    parser.add_argument("action", choices=["create", "drop", "seed"], help="Action to run")
    parser.add_argument("--yes", action="store_true", help="Do not ask for confirmation on drop")

    args = parser.parse_args()

    if args.action == "create":
        init_db()
    elif args.action == "drop":
        drop_db(args.yes)
    elif args.action == "seed":
        init_db()
        with SessionLocal() as session:
            seed_db(session)
