#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
MoodJournal Web Dashboard - FastAPI Application
Веб-дашборд только для чтения: статистика, неделя, календарь и достижения
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from dashboard.api.users import router as users_router
from dashboard.models import HealthResponse
from database.repository import JournalRepository

logger = logging.getLogger(__name__)


def create_app(repository: JournalRepository, debug: bool = False) -> FastAPI:
    """Сборка приложения вокруг готового репозитория дневников"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("🚀 Запуск MoodJournal Dashboard...")
        logger.info(f"📊 Пользователей с данными: {len(repository.known_user_ids())}")
        yield
        logger.info("🛑 Остановка Dashboard...")

    app = FastAPI(
        title="MoodJournal Dashboard",
        description="Аналитика дневника настроения",
        version="1.0.0",
        docs_url="/api/docs" if debug else None,
        redoc_url="/api/redoc" if debug else None,
        openapi_url="/api/openapi.json" if debug else None,
        lifespan=lifespan
    )
    app.state.repository = repository

    # ===== MIDDLEWARE =====

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Логирование запросов и время обработки"""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        client_ip = request.headers.get("X-Forwarded-For", request.client.host if request.client else "-")
        logger.info(
            f"{request.method} {request.url.path} "
            f"- {response.status_code} "
            f"- {process_time:.3f}s "
            f"- {client_ip}"
        )
        response.headers["X-Process-Time"] = str(process_time)
        return response

    # ===== ROUTES =====

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(status="ok", users=len(repository.known_user_ids()))

    app.include_router(users_router)
    return app
