# -*- coding: utf-8 -*-
"""
MoodJournal Dashboard - Dependencies
Провайдеры зависимостей для FastAPI приложения
"""

import logging
from datetime import date
from typing import Optional

from fastapi import Depends, HTTPException, Request, status

from core.journal import MoodJournal
from database.repository import JournalRepository
from utils.datetime_utils import parse_month

logger = logging.getLogger(__name__)


def get_repository(request: Request) -> JournalRepository:
    """Репозиторий дневников, созданный при сборке приложения"""
    return request.app.state.repository


def get_journal(user_id: int, repository: JournalRepository = Depends(get_repository)) -> MoodJournal:
    """Дневник существующего пользователя, перечитанный из хранилища, или 404"""
    if user_id not in repository.known_user_ids():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Пользователь {user_id} не найден")
    return repository.get_journal(user_id, reload=True)


def month_to_date(month: Optional[str]) -> Optional[date]:
    """'ГГГГ-ММ' → первое число месяца; неверный формат даёт 400"""
    if month is None:
        return None
    try:
        year, month_num = parse_month(month)
    except ValueError:
        logger.debug(f"Invalid month requested: {month!r}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                            detail="Месяц должен быть в формате ГГГГ-ММ")
    return date(year, month_num, 1)
