# ui/progress.py

def progress_bar(percent: int, length: int = 12):
    """Генерирует текстовый progress bar (emoji/блоки)"""
    percent = max(0, min(int(percent), 100))
    done = int(length * percent // 100)
    todo = length - done
    return "🟩" * done + "⬜️" * todo + f" {percent}%"


def achievement_bar(current: int, target: int, length: int = 10):
    percent = int(current / target * 100) if target else 100
    return f"{current}/{target} " + progress_bar(percent, length)


def streak_emoji(streak: int):
    if streak >= 30:
        return "🏆"
    elif streak >= 7:
        return "🔥"
    elif streak >= 3:
        return "✨"
    else:
        return "🔹"
