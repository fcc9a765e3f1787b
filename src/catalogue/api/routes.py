"""FastAPI endpoints for the Catalogue domain."""

import json

from fastapi import APIRouter, Depends, Query
from protean.utils.globals import current_domain

from catalogue.api.schemas import (
    CreateProductRequest,
    MessageResponse,
    ProductPageResponse,
    ProductResponse,
    UpdateProductRequest,
)
from catalogue.product.creation import CreateProduct
from catalogue.product.details import UpdateProduct
from catalogue.product.lifecycle import DeactivateProduct
from catalogue.product.product import Product
from catalogue.product.repository import ProductQuery
from shared.logging import get_logger
from shared.security import Principal, require_admin

logger = get_logger(__name__)

product_router = APIRouter(prefix="/products", tags=["products"])


# --- Queries ---


@product_router.get("", response_model=ProductPageResponse)
async def list_products(
    search: str | None = None,
    category: str | None = None,
    min_price: str | None = Query(None, alias="minPrice"),
    max_price: str | None = Query(None, alias="maxPrice"),
    sort_by: str | None = Query(None, alias="sortBy"),
    page: str | None = None,
    limit: str | None = None,
) -> ProductPageResponse:
    query = ProductQuery.from_params(
        search=search,
        category=category,
        min_price=min_price,
        max_price=max_price,
        sort_by=sort_by,
        page=page,
        limit=limit,
    )
    result = current_domain.repository_for(Product).search(query)
    return ProductPageResponse(
        products=[ProductResponse.from_product(product) for product in result.products],
        current_page=result.current_page,
        total_pages=result.total_pages,
        total=result.total,
        has_next_page=result.has_next_page,
        has_prev_page=result.has_prev_page,
    )


@product_router.get("/featured", response_model=list[ProductResponse])
async def featured_products() -> list[ProductResponse]:
    products = current_domain.repository_for(Product).featured()
    return [ProductResponse.from_product(product) for product in products]


@product_router.get("/categories", response_model=list[str])
async def product_categories() -> list[str]:
    return current_domain.repository_for(Product).categories()


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    product = current_domain.repository_for(Product).get(product_id)
    return ProductResponse.from_product(product)


# --- Admin commands ---


@product_router.post("", status_code=201, response_model=ProductResponse)
async def create_product(
    body: CreateProductRequest,
    principal: Principal = Depends(require_admin),
) -> ProductResponse:
    command = CreateProduct(
        name=body.name,
        description=body.description,
        price=body.price,
        original_price=body.original_price,
        category=body.category,
        brand=body.brand,
        images=json.dumps([image.model_dump() for image in body.images]),
        stock=body.stock,
        specifications=json.dumps(body.specifications),
        tags=json.dumps(body.tags),
        weight=body.weight,
        is_featured=body.is_featured,
    )
    product_id = current_domain.process(command, asynchronous=False)
    logger.info("product_created", product_id=product_id, admin_id=principal.user_id)

    product = current_domain.repository_for(Product).get(product_id)
    return ProductResponse.from_product(product)


@product_router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    body: UpdateProductRequest,
    principal: Principal = Depends(require_admin),
) -> ProductResponse:
    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        original_price=body.original_price,
        category=body.category,
        brand=body.brand,
        images=json.dumps([image.model_dump() for image in body.images]) if body.images is not None else None,
        stock=body.stock,
        specifications=json.dumps(body.specifications) if body.specifications is not None else None,
        tags=json.dumps(body.tags) if body.tags is not None else None,
        weight=body.weight,
        is_active=body.is_active,
        is_featured=body.is_featured,
    )
    current_domain.process(command, asynchronous=False)
    logger.info("product_updated", product_id=product_id, admin_id=principal.user_id)

    product = current_domain.repository_for(Product).get(product_id)
    return ProductResponse.from_product(product)


@product_router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: str,
    principal: Principal = Depends(require_admin),
) -> MessageResponse:
    current_domain.process(DeactivateProduct(product_id=product_id), asynchronous=False)
    logger.info("product_deactivated", product_id=product_id, admin_id=principal.user_id)
    return MessageResponse(message="Product removed")
