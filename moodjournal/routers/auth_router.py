# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MoodJournal - Your Reflective Journal project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy import or_
from sqlalchemy.orm import Session

from moodjournal.auth import get_current_user
from moodjournal.models.database import get_db
from moodjournal.models.user import User
from moodjournal.schemas.user_schemas import SignupRequest, LoginRequest
from moodjournal.utils.jwt_utils import create_user_token
from moodjournal.utils.password_utils import get_password_hash, verify_password
from moodjournal.utils.rate_limit_utils import limiter, AUTH_RATE_LIMIT

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/register", status_code=201)
@router.post("/signup", status_code=201)
@limiter.limit(AUTH_RATE_LIMIT)
def signup(request: Request, payload: SignupRequest, db: Session = Depends(get_db)):
    existing = db.query(User).filter(
        or_(User.email == payload.email, User.username == payload.username)
    ).first()
    if existing:
        raise HTTPException(status_code=400, detail="User with this email or username already exists")

    new_user = User(
        username=payload.username,
        email=payload.email,
        hashed_password=get_password_hash(payload.password),
    )
    db.add(new_user)
    db.commit()
    db.refresh(new_user)

    logger.info(f"🆕 New user registered: {new_user.id}")

    return {
        "message": "User registered successfully",
        "token": create_user_token(new_user.id),
        "user": new_user.to_public_dict(),
    }


@router.post("/login")
@limiter.limit(AUTH_RATE_LIMIT)
def login(request: Request, payload: LoginRequest, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == payload.email).first()

    if not user or not verify_password(payload.password, user.hashed_password):
        logger.warning("🔒 Failed login attempt")
        raise HTTPException(status_code=400, detail="Invalid credentials")

    return {
        "message": "Login successful",
        "token": create_user_token(user.id),
        "user": user.to_public_dict(),
    }


@router.get("/me")
def get_me(user: User = Depends(get_current_user)):
    return {"user": user.to_public_dict()}
