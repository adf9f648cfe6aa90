# warikan/main.py
# Главная точка входа FastAPI для Warikan.
#  • Конфигурация - через переменные окружения (.env подхватывается load_dotenv):
#      LOG_LEVEL     - уровень логирования (по умолчанию INFO)
#      CORS_ORIGINS  - список origin через запятую (по умолчанию локальные dev-адреса)
#  • Хранилище - в памяти процесса (см. warikan/store.py), БД нет.

from __future__ import annotations

import logging
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dotenv import load_dotenv
load_dotenv()

from warikan.routers.members import router as members_router
from warikan.routers.expenses import router as expenses_router
from warikan.routers.settlement import router as settlement_router

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]


def get_cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or DEFAULT_CORS_ORIGINS


app = FastAPI(
    title="Warikan Backend",
    description="Backend для Warikan: участники, расходы группы и план взаиморасчётов.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Подключение роутеров ---
app.include_router(members_router,    prefix="/api/members",    tags=["Участники"])
app.include_router(expenses_router,   prefix="/api/expenses",   tags=["Расходы"])
app.include_router(settlement_router, prefix="/api/settlement", tags=["Взаиморасчёты"])


@app.get("/")
def root():
    """Простой healthcheck."""
    return {"message": "Warikan backend работает!", "docs": "/docs"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("warikan.main:app", host="0.0.0.0", port=int(os.getenv("PORT", "8000")), reload=False)
