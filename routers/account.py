# routers/account.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from config.database import get_db
from models.user import User
from schemas.account import AuthResultOut, LoginIn, RegisterIn, TokenOut
from services.account_service import AccountService
from utils.dependencies import get_current_user

router = APIRouter(prefix="/api/account", tags=["account"])


def get_service(db: Session = Depends(get_db)) -> AccountService:
    return AccountService(db)


@router.post("/register", response_model=AuthResultOut)
def register(body: RegisterIn, service: AccountService = Depends(get_service)):
    result = service.register(body)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.message)
    return result


@router.post("/login", response_model=AuthResultOut)
def login(body: LoginIn, service: AccountService = Depends(get_service)):
    result = service.login(body)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.message)
    return result


@router.get("/token", response_model=TokenOut)
def token(current: User = Depends(get_current_user), service: AccountService = Depends(get_service)):
    return service.get_token(current)
