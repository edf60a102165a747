# app/main.py
from dotenv import load_dotenv

load_dotenv()

import logging
import os
from typing import List

from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from .core import Outcome, Result, create_product, get_product, list_products
from .models import Product, ProductIn

logging.basicConfig(level=os.getenv("CATALOG_LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

app = FastAPI(title="product catalog (in-memory sample)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in os.getenv("CATALOG_CORS_ORIGINS", "*").split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

router = APIRouter(prefix="/api")

# Status codes for every non-OK store outcome; these responses carry no body.
ERROR_STATUS = {
    Outcome.NOT_FOUND: 404,
    Outcome.REJECTED: 400,
}


def _error_response(result: Result) -> Response:
    return Response(status_code=ERROR_STATUS[result.outcome])


# ---------------------------
# Product endpoints
# ---------------------------
@router.get("/products", response_model=List[Product])
async def list_products_endpoint():
    return list_products()


@router.get("/products/{product_id}", response_model=Product, name="get_product")
async def get_product_endpoint(product_id: int):
    result = get_product(product_id)
    if not result.ok:
        logger.info("product %d not found", product_id)
        return _error_response(result)
    return result.value


@router.post("/products", response_model=Product, status_code=201)
async def create_product_endpoint(payload: ProductIn, request: Request, response: Response):
    result = create_product(payload)
    if not result.ok:
        return _error_response(result)
    product = result.value
    response.headers["Location"] = str(request.url_for("get_product", product_id=product.id))
    return product


app.include_router(router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=os.getenv("CATALOG_HOST", "127.0.0.1"),
        port=int(os.getenv("CATALOG_PORT", "5219")),
    )
