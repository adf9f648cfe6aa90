# warikan/schemas/member.py
from pydantic import BaseModel, Field


class MemberCreate(BaseModel):
    name: str = Field(..., description="Имя участника (обрезается по пробелам, уникально)")


class MemberOut(BaseModel):
    name: str
    position: int = Field(..., description="Порядок добавления; первые участники берут остаток от деления")
