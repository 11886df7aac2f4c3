"""Server-rendered storefront pages backed by sample catalogue data."""

from __future__ import annotations

from collections.abc import Callable
from http import HTTPStatus
from typing import Any

from marketcore.templates import (
    CategoryContext,
    HomeTemplate,
    LoginTemplate,
    ProductContext,
    ProductDetailContext,
    ProductDetailTemplate,
    ProductImageContext,
    ProductsTemplate,
    ProductVariantContext,
    RegisterTemplate,
    ReviewContext,
    ShippingOptionContext,
    VendorContext,
)

PLACEHOLDER_IMAGE = "/static/images/placeholder.svg"
DEFAULT_CURRENCY = "btc"


def create_route() -> dict[tuple[str, str], Callable[..., Any]]:
    """Map (method, path) pairs to the page handlers."""
    return {
        ("GET", "/"): home,
        ("GET", "/login"): login,
        ("GET", "/register"): register,
        ("GET", "/products"): products,
        ("GET", "/products/:id"): product_detail,
        ("GET", "/api/products/:id/image/:image_id"): product_image,
    }


def home() -> HomeTemplate:
    return HomeTemplate(user=None)


def login() -> LoginTemplate:
    return LoginTemplate(user=None, error=None, pgp_challenge=None)


def register() -> RegisterTemplate:
    return RegisterTemplate(user=None, error=None)


def products(
    page: int | None = None,
    category: int | None = None,
    search: str | None = None,
    currency: str | None = None,
) -> ProductsTemplate:
    """Product listing page; category and search are accepted but not yet applied."""
    return ProductsTemplate(
        user=None,
        products=[
            mock_product(1, "Product 1", 4.5, 10),
            mock_product(2, "Product 2", 5.0, 25),
            mock_product(3, "Product 3", 3.5, 5),
            mock_product(4, "Product 4", 4.0, 15),
            mock_product(5, "Product 5", 4.8, 30),
            mock_product(6, "Product 6", 3.0, 8),
        ],
        categories=[
            mock_category(1, "Electronics"),
            mock_category(2, "Clothing"),
            mock_category(3, "Books"),
            mock_category(4, "Home & Garden"),
            mock_category(5, "Toys"),
        ],
        currency=DEFAULT_CURRENCY if currency is None else currency,
        page=1 if page is None else page,
        total_pages=3,
    )


def product_detail(product_id: int) -> ProductDetailTemplate:
    return ProductDetailTemplate(
        user=None,
        product=mock_product_detail(product_id),
        currency=DEFAULT_CURRENCY,
    )


def product_image(product_id: int, image_id: int) -> tuple[HTTPStatus, dict[str, str]]:
    """Redirect to the placeholder image; returns the status and headers."""
    return HTTPStatus.SEE_OTHER, {"location": PLACEHOLDER_IMAGE}


def mock_product(
    product_id: int, title: str, rating: float, review_count: int
) -> ProductContext:
    return ProductContext(
        id=product_id,
        title=title,
        vendor_id=1,
        vendor_name="VendorName",
        price_btc="0.001",
        price_xmr="0.1",
        rating=rating,
        review_count=review_count,
        primary_image=1,
        stock=100,
        sales_count=50,
    )


def mock_category(category_id: int, name: str) -> CategoryContext:
    return CategoryContext(
        id=category_id,
        name=name,
        description=f"Description for {name}",
        parent_id=None,
    )


def mock_product_detail(product_id: int) -> ProductDetailContext:
    title = f"Product {product_id}"
    return ProductDetailContext(
        id=product_id,
        title=title,
        description=(
            "This is a detailed description of the product. It includes information "
            "about the features, specifications, and usage instructions."
        ),
        vendor=VendorContext(
            id=1,
            username="VendorName",
            is_verified=True,
            rating=4.5,
            total_sales=100,
            response_time="2 hours",
            created_at="2023-01-01",
            status="verified",
        ),
        category=mock_category(1, "Electronics"),
        price_btc="0.001",
        price_xmr="0.1",
        stock=100,
        rating=4.5,
        review_count=10,
        primary_image_id=1,
        images=[
            ProductImageContext(id=1, is_primary=True),
            ProductImageContext(id=2, is_primary=False),
        ],
        variants=[
            ProductVariantContext(
                id=1,
                title="Variant 1",
                description="Description for Variant 1",
                price_btc="0.001",
                price_xmr="0.1",
                stock=50,
            ),
            ProductVariantContext(
                id=2,
                title="Variant 2",
                description="Description for Variant 2",
                price_btc="0.0012",
                price_xmr="0.12",
                stock=50,
            ),
        ],
        shipping_options=[
            ShippingOptionContext(
                name="Standard Shipping",
                description="7-10 business days",
                price_btc="0.0001",
                price_xmr="0.01",
            ),
            ShippingOptionContext(
                name="Express Shipping",
                description="3-5 business days",
                price_btc="0.0002",
                price_xmr="0.02",
            ),
        ],
        reviews=[
            ReviewContext(
                id=1,
                order_id=1,
                product_id=product_id,
                product_title=title,
                reviewer_id=2,
                reviewer_username="Buyer1",
                rating=5,
                comment="Great product, exactly as described!",
                created_at="2023-05-15",
            ),
            ReviewContext(
                id=2,
                order_id=2,
                product_id=product_id,
                product_title=title,
                reviewer_id=3,
                reviewer_username="Buyer2",
                rating=4,
                comment="Good product, but shipping was a bit slow.",
                created_at="2023-05-10",
            ),
        ],
    )