"""
Jinja2 template environment shared by the HTML routes and error handlers.
"""
from pathlib import Path
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

DRUG_LIST_VIEW = "drugs/drug_list.html"
DRUG_FORM_VIEW = "drugs/create_or_update_drug_form.html"
ERROR_VIEW = "error.html"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
