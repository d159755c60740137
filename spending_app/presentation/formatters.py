from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence

from spending_app.config import settings
from spending_app.domain.models import Category, PersonalityType, SpendingEntry, SpendingSummary

CATEGORY_EMOJI = {
    Category.BEER: "🍺",
    Category.GYM: "💪",
}

PERSONALITY_EMOJI = {
    PersonalityType.ALCOHOLIC: "🍺",
    PersonalityType.FITNESS_ENTHUSIAST: "💪",
    PersonalityType.BALANCED: "⚖️",
}

PERSONALITY_BLURB = {
    PersonalityType.ALCOHOLIC: "Your wallet says the bar sees more of you than the gym does.",
    PersonalityType.FITNESS_ENTHUSIAST: "Your wallet says the gym is winning. Keep it up!",
    PersonalityType.BALANCED: "Perfect balance between cheers and reps.",
}


def format_amount(value, symbol: str = None) -> str:
    symbol = settings.CURRENCY_SYMBOL if symbol is None else symbol
    amount = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{symbol}{amount}"


def personality_emoji(personality: PersonalityType) -> str:
    return PERSONALITY_EMOJI[PersonalityType(personality)]


def format_entry(entry: SpendingEntry) -> str:
    line = (
        f"{entry.date.isoformat()}  "
        f"{CATEGORY_EMOJI[entry.category]} {entry.category.value:<4}  "
        f"{format_amount(entry.amount)}"
    )
    if entry.description:
        line += f"  {entry.description}"
    return line


def format_summary(summary: SpendingSummary) -> str:
    personality = summary.personality_type
    return (
        "📊 Spending Dashboard\n\n"
        f"🍺 Beer:  {format_amount(summary.beer_total)}\n"
        f"💪 Gym:   {format_amount(summary.gym_total)}\n"
        f"💰 Total: {format_amount(summary.total_spending)}\n\n"
        f"{personality_emoji(personality)} You are {personality.value}\n"
        f"{PERSONALITY_BLURB[personality]}"
    )


def format_dashboard(summary: SpendingSummary, entries: Sequence[SpendingEntry]) -> str:
    lines = [format_summary(summary), "", "🧾 Entries"]
    if not entries:
        lines.append("No entries yet. Log your first Beer or Gym expense.")
    else:
        lines.extend(format_entry(e) for e in entries)
    return "\n".join(lines)
