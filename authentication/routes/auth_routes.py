from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorDatabase
from ..config.database import get_db
from ..helper.validation import validate_body
from ..models import models
from ..src import auth_member

auth_router = APIRouter(tags=["Member Authentication"], prefix="/v1/auth") # create a router for member auth


@auth_router.post("/register", status_code=status.HTTP_201_CREATED, response_model=models.AuthResponse, response_model_exclude_none=True)
async def member_register(data: models.register = Depends(validate_body(models.register)), db: AsyncIOMotorDatabase = Depends(get_db)):
    return await auth_member.register(db, data)

@auth_router.post("/login", status_code=status.HTTP_200_OK, response_model=models.AuthResponse, response_model_exclude_none=True)
async def member_login(data: models.login = Depends(validate_body(models.login)), db: AsyncIOMotorDatabase = Depends(get_db)):
    return await auth_member.login(db, data)

@auth_router.post("/facebook", status_code=status.HTTP_200_OK, response_model=models.AuthResponse, response_model_exclude_none=True)
async def member_facebook(data: models.oauth_login = Depends(validate_body(models.oauth_login)), db: AsyncIOMotorDatabase = Depends(get_db)):
    return await auth_member.oauth_login(db, "facebook", data)

@auth_router.post("/google", status_code=status.HTTP_200_OK, response_model=models.AuthResponse, response_model_exclude_none=True)
async def member_google(data: models.oauth_login = Depends(validate_body(models.oauth_login)), db: AsyncIOMotorDatabase = Depends(get_db)):
    return await auth_member.oauth_login(db, "google", data)

@auth_router.post("/refresh-token", status_code=status.HTTP_200_OK, response_model=models.TokenPair)
async def member_refresh_token(data: models.refresh_token = Depends(validate_body(models.refresh_token)), db: AsyncIOMotorDatabase = Depends(get_db)):
    return await auth_member.refresh(db, data)
