"""Shared defaults and category display colours."""

from day_planner.schema import Category

DEFAULT_DURATION = 30
DEFAULT_CATEGORY = Category.OTHER
DEFAULT_DAY_START = "07:00"

CATEGORY_CHART_COLORS: dict[Category, str] = {
    Category.STUDY: "#6366f1",
    Category.WORK: "#10b981",
    Category.SOCIAL: "#f59e0b",
    Category.REST: "#f43f5e",
    Category.GAMING: "#8b5cf6",
    Category.OTHER: "#64748b",
}
