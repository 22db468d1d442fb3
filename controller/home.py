from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


WELCOME_MESSAGE = "Welcome to the DevOps CI/CD Project!"

router = APIRouter(default_response_class=PlainTextResponse)


@router.get("/")
async def home() -> str:
    return WELCOME_MESSAGE


@router.get("/hello")
async def hello() -> str:
    return WELCOME_MESSAGE
