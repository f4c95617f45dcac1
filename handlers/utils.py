# ===== handlers/utils.py =====
import logging

from telegram import Update
from telegram.ext import ContextTypes

from core.journal import MoodJournal
from core.models import EntryDraft
from database.repository import JournalRepository
from ui.messages import achievement_unlocked_message

logger = logging.getLogger(__name__)

REPOSITORY_KEY = "repository"
DRAFT_KEY = "draft"


def get_repository(context: ContextTypes.DEFAULT_TYPE) -> JournalRepository:
    return context.bot_data[REPOSITORY_KEY]


def get_journal(update: Update, context: ContextTypes.DEFAULT_TYPE) -> MoodJournal:
    """Дневник текущего пользователя"""
    return get_repository(context).get_journal(update.effective_user.id)


def get_draft(context: ContextTypes.DEFAULT_TYPE) -> EntryDraft:
    """Черновик записи пользователя, создаётся при первом обращении"""
    draft = context.user_data.get(DRAFT_KEY)
    if draft is None:
        draft = EntryDraft()
        context.user_data[DRAFT_KEY] = draft
    return draft


async def announce_unlocks(message, journal: MoodJournal) -> int:
    """Показать и очистить все новые достижения"""
    unlocked = journal.drain_unlocked()
    for achievement in unlocked:
        await message.reply_text(achievement_unlocked_message(achievement), parse_mode="HTML")
    return len(unlocked)
