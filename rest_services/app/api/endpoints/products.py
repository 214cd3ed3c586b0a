"""
Product endpoints.

``/products`` lists and creates products, ``/products/{id}`` reads,
updates and (nominally) deletes a single product.  Request bodies are
read and decoded by hand rather than through a body parameter so that
the status codes follow the checks in order: an unparseable id is a
404, a non-JSON content type a 415 and an undecodable body a 400.
Other methods on these paths are answered with 405 by FastAPI.
"""

import re
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ValidationError

from rest_services.app.api.deps import get_product_service
from rest_services.app.schemas.product import Product, ProductCreate, ProductUpdate
from rest_services.app.services.product_service import ProductService

router = APIRouter()

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_product_id(raw: str) -> int:
    """Convert the ``{id}`` path segment to an int or raise a 404."""
    if _ID_PATTERN.fullmatch(raw):
        try:
            return int(raw)
        except ValueError:
            # Longer than the interpreter allows for int conversion.
            pass
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="malformed id")


def require_json(request: Request) -> None:
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type != "application/json":
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="Content type should be application/json.",
        )


async def read_model(request: Request, model: type[BaseModel]) -> BaseModel:
    """Decode the request body into ``model`` or raise a 400."""
    body = await request.body()
    require_json(request)
    if body.strip() == b"null":
        # A JSON null decodes to a product with every field left empty.
        return model()
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        message = "; ".join(error["msg"] for error in e.errors()) or "invalid JSON body"
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message) from e


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product Id doesn't exist.")


@router.get("", response_model=List[Product])
async def list_products(service: ProductService = Depends(get_product_service)) -> List[Product]:
    """Return every product in insertion order."""
    return await service.list_products()


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: Request,
    response: Response,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Append a product to the collection.

    The body must be a JSON object sent as ``application/json``.  The
    ``Location`` header points at the new product.
    """
    data = await read_model(request, ProductCreate)
    product_id, product = await service.create_product(data)
    response.headers["Location"] = f"/products/{product_id}"
    return product


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: str, service: ProductService = Depends(get_product_service)) -> Product:
    """Retrieve a single product by id; 404 if it is out of range."""
    product = await service.get_product(parse_product_id(product_id))
    if product is None:
        raise _not_found()
    return product


@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: str,
    request: Request,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Update the non-empty fields of an existing product."""
    index = parse_product_id(product_id)
    data = await read_model(request, ProductUpdate)
    product = await service.update_product(index, data)
    if product is None:
        raise _not_found()
    return product


@router.delete("/{product_id}", response_class=PlainTextResponse)
async def delete_product(product_id: str) -> str:
    # Deletion is not implemented; the collection is left untouched.
    return "Delete!"
