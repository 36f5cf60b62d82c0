from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Request

from chirpy.repositories.errors import PostNotFoundError
from chirpy.routers.dependencies import get_chirp_service
from chirpy.schemas import ChirpCreate, ChirpResponse
from chirpy.services.chirp_service import ChirpTooLongError

router = APIRouter(prefix="/api/chirps", tags=["chirps"])


@router.post("", status_code=201, response_model=ChirpResponse)
def create_chirp(payload: ChirpCreate, request: Request):
    svc = get_chirp_service(request)
    try:
        post = svc.publish(payload.body)
    except ChirpTooLongError as exc:
        raise HTTPException(400, str(exc))
    return post.to_dict()


@router.get("", response_model=List[ChirpResponse])
def list_chirps(request: Request):
    svc = get_chirp_service(request)
    return [post.to_dict() for post in svc.list_chirps()]


@router.get("/{chirp_id}", response_model=ChirpResponse)
def get_chirp(chirp_id: int, request: Request):
    svc = get_chirp_service(request)
    try:
        post = svc.get_chirp(chirp_id)
    except PostNotFoundError:
        raise HTTPException(404, "Chirp not found")
    return post.to_dict()
