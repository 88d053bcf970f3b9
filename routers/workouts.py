# routers/workouts.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from config.database import get_db
from models.user import User
from schemas.common import ApiResult
from schemas.workout import WorkoutIn, WorkoutOut
from services.pagination import PageRequest
from services.workout_service import WorkoutService
from routers.common import check_ids_match, page_params, unwrap, unwrap_found, unwrap_page
from utils.dependencies import get_current_user

router = APIRouter(prefix="/api/workouts", tags=["workouts"])


def get_service(db: Session = Depends(get_db)) -> WorkoutService:
    return WorkoutService(db)


@router.get("", response_model=ApiResult[WorkoutOut])
def list_workouts(
    page: PageRequest = Depends(page_params),
    current: User = Depends(get_current_user),
    service: WorkoutService = Depends(get_service),
):
    return unwrap_page(service.get_user_workouts(current.id), page, WorkoutOut)


@router.get("/workout-exists/{workout_id}", response_model=bool)
def workout_exists(workout_id: int, current: User = Depends(get_current_user), service: WorkoutService = Depends(get_service)):
    return unwrap(service.exists(current.id, workout_id))


@router.get("/workout-exists-by-name/{name}", response_model=bool)
def workout_exists_by_name(name: str, current: User = Depends(get_current_user), service: WorkoutService = Depends(get_service)):
    return unwrap(service.exists_by_name(current.id, name))


@router.get("/by-name/{name}", response_model=WorkoutOut)
def workout_by_name(name: str, current: User = Depends(get_current_user), service: WorkoutService = Depends(get_service)):
    return unwrap_found(service.get_by_name(current.id, name), "Workout")


@router.get("/{workout_id}", response_model=WorkoutOut)
def get_workout(workout_id: int, current: User = Depends(get_current_user), service: WorkoutService = Depends(get_service)):
    return unwrap_found(service.get_by_id(current.id, workout_id), "Workout")


@router.post("", response_model=WorkoutOut, status_code=status.HTTP_201_CREATED)
def add_workout(body: WorkoutIn, current: User = Depends(get_current_user), service: WorkoutService = Depends(get_service)):
    return unwrap(service.add(current.id, body))


@router.put("/{workout_id}", response_model=WorkoutOut)
def update_workout(
    workout_id: int,
    body: WorkoutIn,
    current: User = Depends(get_current_user),
    service: WorkoutService = Depends(get_service),
):
    check_ids_match(workout_id, body.id, "Workout")
    return unwrap(service.update(current.id, body.model_copy(update={"id": workout_id})))


@router.put("/{workout_id}/pin", response_model=WorkoutOut)
def pin_workout(workout_id: int, current: User = Depends(get_current_user), service: WorkoutService = Depends(get_service)):
    return unwrap(service.pin(current.id, workout_id))


@router.put("/{workout_id}/unpin", response_model=WorkoutOut)
def unpin_workout(workout_id: int, current: User = Depends(get_current_user), service: WorkoutService = Depends(get_service)):
    return unwrap(service.unpin(current.id, workout_id))


@router.put("/{workout_id}/complete", response_model=WorkoutOut)
def complete_workout(workout_id: int, current: User = Depends(get_current_user), service: WorkoutService = Depends(get_service)):
    return unwrap(service.complete(current.id, workout_id))


@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workout(workout_id: int, current: User = Depends(get_current_user), service: WorkoutService = Depends(get_service)):
    unwrap(service.delete(current.id, workout_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
