"""
Drug routes.
Handles the HTML pages for listing, creating, editing and deleting drugs.
"""
from fastapi import APIRouter, Depends, Form, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from src.services.drug_service import DrugService
from src.core.dependencies import get_drug_service
from src.models.dto.drug_dto import DrugForm, DrugFormResult
from src.api.templating import DRUG_FORM_VIEW, DRUG_LIST_VIEW, templates

router = APIRouter(prefix="/drugs", tags=["Drugs"])


def drug_form(name: str = Form(default=""), price: str = Form(default="")) -> DrugForm:
    """Bind the submitted form fields; missing fields bind as empty strings."""
    return DrugForm(name=name, price=price)


def _render(request: Request, result: DrugFormResult):
    """Redirect after a successful write, otherwise (re)display the form."""
    if result.is_redirect:
        return RedirectResponse(result.redirect_to, status_code=status.HTTP_303_SEE_OTHER)

    return templates.TemplateResponse(
        request,
        DRUG_FORM_VIEW,
        {
            "drug": result.form,
            "drug_id": result.drug_id,
            "errors": result.errors,
            "is_new": result.is_new
        }
    )


@router.get("", response_class=HTMLResponse)
async def list_drugs(
    request: Request,
    page: int = Query(default=1, ge=1, description="1-based page number"),
    drug_service: DrugService = Depends(get_drug_service)
):
    """
    Show one page of the drug list.
    """
    view = drug_service.list_drugs(page)
    return templates.TemplateResponse(
        request,
        DRUG_LIST_VIEW,
        {
            "list_drugs": view.drugs,
            "current_page": view.current_page,
            "total_pages": view.total_pages,
            "total_items": view.total_items
        }
    )


@router.get("/new", response_class=HTMLResponse)
async def init_creation_form(
    request: Request,
    drug_service: DrugService = Depends(get_drug_service)
):
    return _render(request, drug_service.init_creation_form())


@router.post("/new", response_class=HTMLResponse)
async def process_creation_form(
    request: Request,
    form: DrugForm = Depends(drug_form),
    drug_service: DrugService = Depends(get_drug_service)
):
    """
    Create a drug. Invalid input re-renders the form with status 200.
    """
    return _render(request, drug_service.process_creation_form(form))


@router.get("/{drug_id}/edit", response_class=HTMLResponse)
async def init_update_form(
    request: Request,
    drug_id: int,
    drug_service: DrugService = Depends(get_drug_service)
):
    return _render(request, drug_service.init_update_form(drug_id))


@router.post("/{drug_id}/edit", response_class=HTMLResponse)
async def process_update_form(
    request: Request,
    drug_id: int,
    form: DrugForm = Depends(drug_form),
    drug_service: DrugService = Depends(get_drug_service)
):
    """
    Update a drug. Invalid input re-renders the form with status 200.
    """
    return _render(request, drug_service.process_update_form(drug_id, form))


@router.get("/{drug_id}/delete")
async def delete_drug(
    drug_id: int,
    drug_service: DrugService = Depends(get_drug_service)
):
    result = drug_service.delete_drug(drug_id)
    return RedirectResponse(result.redirect_to, status_code=status.HTTP_303_SEE_OTHER)
