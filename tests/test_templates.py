import datetime as dt

import pytest

from marketcore.templates import (
    CategoryContext,
    HomeTemplate,
    LoginTemplate,
    ProductDetailContext,
    ProductDetailTemplate,
    ProductImageContext,
    ProductsTemplate,
    RegisterTemplate,
    VendorContext,
    current_year,
    to_dict,
)


def _vendor():
    return VendorContext(
        id=1,
        username="VendorName",
        is_verified=True,
        rating=4.5,
        total_sales=100,
        response_time="2 hours",
        created_at="2023-01-01",
        status="verified",
    )


def _detail(product_id=1):
    return ProductDetailContext(
        id=product_id,
        title=f"Product {product_id}",
        description="d",
        vendor=_vendor(),
        category=CategoryContext(id=1, name="Electronics"),
        price_btc=None,
        price_xmr=None,
        stock=0,
        rating=0.0,
        review_count=0,
        primary_image_id=None,
    )


def test_current_year_matches_utc_clock():
    before = dt.datetime.now(dt.timezone.utc).year
    year = current_year()
    after = dt.datetime.now(dt.timezone.utc).year
    assert before <= year <= after


def test_template_paths():
    assert HomeTemplate(current_year=2023).template_path == "pages/home.html"
    assert LoginTemplate(current_year=2023).template_path == "pages/login.html"
    assert RegisterTemplate(current_year=2023).template_path == "pages/register.html"
    products = ProductsTemplate(
        products=[],
        categories=[],
        currency="btc",
        page=1,
        total_pages=1,
        current_year=2023,
    )
    assert products.template_path == "pages/products.html"
    detail = ProductDetailTemplate(product=_detail(), currency="btc", current_year=2023)
    assert detail.template_path == "pages/product_detail.html"


def test_home_template_defaults_to_current_year():
    template = HomeTemplate()
    assert template.user is None
    assert template.current_year == current_year()


def test_login_template_to_dict():
    template = LoginTemplate(current_year=2023, error="Invalid")
    assert to_dict(template) == {
        "user": None,
        "current_year": 2023,
        "error": "Invalid",
        "pgp_challenge": None,
    }


def test_products_template_requires_fields():
    with pytest.raises(TypeError):
        ProductsTemplate()


def test_nested_context_to_dict():
    detail = ProductDetailContext(
        id=3,
        title="Product 3",
        description="desc",
        vendor=_vendor(),
        category=CategoryContext(id=1, name="Electronics"),
        price_btc="0.001",
        price_xmr=None,
        stock=100,
        rating=4.5,
        review_count=10,
        primary_image_id=1,
        images=[ProductImageContext(id=1, is_primary=True)],
    )
    data = to_dict(detail)
    assert data["vendor"]["username"] == "VendorName"
    assert data["category"] == {
        "id": 1,
        "name": "Electronics",
        "description": None,
        "parent_id": None,
    }
    assert data["images"] == [{"id": 1, "is_primary": True}]
    assert data["variants"] == []
    assert data["price_xmr"] is None


def test_detail_template_wraps_product():
    template = ProductDetailTemplate(product=_detail(2), currency="btc", current_year=2024)
    data = to_dict(template)
    assert data["product"]["title"] == "Product 2"
    assert data["currency"] == "btc"
    assert "template_path" not in data


def test_to_dict_rejects_non_context():
    with pytest.raises(TypeError):
        to_dict({"id": 1})
    with pytest.raises(TypeError):
        to_dict(HomeTemplate)