from fastapi import APIRouter

from routers import bite

ROUTERS: list[APIRouter] = [bite.router]
