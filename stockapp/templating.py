# stockapp/templating.py

from pathlib import Path

from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def format_price(value):
    if value is None:
        return "-"
    return f"{value:,.2f}"


templates.env.filters["price"] = format_price
