import io
from typing import Dict, Iterable, List

from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from mealplanner.domain.GroceryItem import GroceryItem
from mealplanner.domain.MealPlan import CustomMeal, MealPlan, RecipeMeal
from mealplanner.domain.Recipe import Recipe
from mealplanner.logic.shopping.summary import group_by_store_and_category, summarize_grocery_items
from mealplanner.utilities.constants import DAY_NAMES, MEAL_TYPES
from mealplanner.utilities.dates import day_date

HEADER_STYLE = [
    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#4CAF50")),
    ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
    ("ALIGN", (0, 0), (-1, -1), "CENTER"),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("FONTSIZE", (0, 0), (-1, 0), 12),
    ("BOTTOMPADDING", (0, 0), (-1, 0), 10),
    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
]

# Monday first, Sunday (0) last
WEEK_ORDER = (1, 2, 3, 4, 5, 6, 0)


def _meal_label(plan: MealPlan, recipes: Dict[str, Recipe]) -> str:
    meal = plan.meal
    if isinstance(meal, RecipeMeal):
        recipe = recipes.get(meal.recipe_id)
        label = recipe.name if recipe else "(missing recipe)"
    elif isinstance(meal, CustomMeal):
        label = meal.name
    else:
        return "-"
    return f"{label} (leftover)" if plan.is_leftover else label


def _build(elements: List) -> bytes:
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )
    doc.build(elements)
    return buf.getvalue()


def generate_pdf_for_week(week_start: str, meal_plans: Iterable[MealPlan], recipes: Iterable[Recipe]) -> bytes:
    """Generate a simple PDF table: Day / Breakfast / Lunch / Dinner for the week."""
    recipe_index = {r.id: r for r in recipes}
    slots: Dict[tuple, List[str]] = {}
    for plan in meal_plans:
        slots.setdefault((plan.day_of_week, plan.meal_type), []).append(_meal_label(plan, recipe_index))

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"Meal Plan - Week of {week_start}", styles["Title"]),
        Spacer(1, 16),
    ]

    data = [["Day", "Breakfast", "Lunch", "Dinner"]]
    for dow in WEEK_ORDER:
        row = [f"{DAY_NAMES[dow]} ({day_date(week_start, dow).strftime('%d.%m.%Y')})"]
        for meal_type in MEAL_TYPES:
            row.append(", ".join(slots.get((dow, meal_type), [])) or "-")
        data.append(row)

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle(HEADER_STYLE))
    elements.append(table)
    return _build(elements)


def generate_grocery_pdf(week_start: str, items: Iterable[GroceryItem]) -> bytes:
    """Grocery list PDF: one table per store, rows grouped by category."""
    items = list(items)
    styles = getSampleStyleSheet()
    totals = summarize_grocery_items(items)
    elements = [
        Paragraph(f"Grocery List - Week of {week_start}", styles["Title"]),
        Paragraph(f"{totals['total']} items, estimated ${totals['estimated_total']:.2f}", styles["Normal"]),
        Spacer(1, 16),
    ]
    for store, by_category in group_by_store_and_category(items).items():
        elements.append(Paragraph(store, styles["Heading2"]))
        data = [["", "Item", "Quantity", "Category", "Price"]]
        for category, category_items in by_category.items():
            for item in category_items:
                data.append([
                    "x" if item.is_completed else "",
                    item.name,
                    item.quantity,
                    category,
                    item.estimated_price or "",
                ])
        table = Table(data, repeatRows=1)
        table.setStyle(TableStyle(HEADER_STYLE))
        elements.extend([table, Spacer(1, 12)])
    if not items:
        elements.append(Paragraph("Nothing to buy this week.", styles["Normal"]))
    return _build(elements)
