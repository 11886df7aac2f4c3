"""Page templates and the context objects they are rendered with."""

from __future__ import annotations

import dataclasses
import datetime as _dt
from dataclasses import dataclass, field
from typing import Any, ClassVar


def current_year() -> int:
    """The current calendar year in UTC."""
    return _dt.datetime.now(_dt.timezone.utc).year


def to_dict(context: Any) -> dict[str, Any]:
    """Turn a context or template object into plain nested data."""
    if not dataclasses.is_dataclass(context) or isinstance(context, type):
        raise TypeError(f"expected a context object, got {type(context).__name__}")
    return dataclasses.asdict(context)


@dataclass
class UserContext:
    id: int
    username: str
    role: str
    created_at: str
    pgp_public_key: str | None = None
    pgp_added_date: str | None = None
    reputation: float | None = None
    review_count: int | None = None
    is_vendor: bool = False
    is_admin: bool = False
    is_moderator: bool = False


@dataclass
class CategoryContext:
    id: int
    name: str
    description: str | None = None
    parent_id: int | None = None


@dataclass
class ProductContext:
    id: int
    title: str
    vendor_id: int
    vendor_name: str
    price_btc: str | None
    price_xmr: str | None
    rating: float
    review_count: int
    primary_image: int | None
    stock: int
    sales_count: int | None = None


@dataclass
class ProductImageContext:
    id: int
    is_primary: bool


@dataclass
class ProductVariantContext:
    id: int
    title: str
    description: str | None
    price_btc: str | None
    price_xmr: str | None
    stock: int


@dataclass
class ShippingOptionContext:
    name: str
    description: str
    price_btc: str
    price_xmr: str


@dataclass
class VendorContext:
    id: int
    username: str
    is_verified: bool
    rating: float
    total_sales: int
    response_time: str
    created_at: str
    status: str


@dataclass
class ReviewContext:
    id: int
    order_id: int
    product_id: int
    product_title: str
    reviewer_id: int
    reviewer_username: str
    rating: int
    comment: str
    created_at: str


@dataclass
class ProductDetailContext:
    id: int
    title: str
    description: str
    vendor: VendorContext
    category: CategoryContext
    price_btc: str | None
    price_xmr: str | None
    stock: int
    rating: float
    review_count: int
    primary_image_id: int | None
    images: list[ProductImageContext] = field(default_factory=list)
    variants: list[ProductVariantContext] = field(default_factory=list)
    shipping_options: list[ShippingOptionContext] = field(default_factory=list)
    reviews: list[ReviewContext] = field(default_factory=list)


@dataclass
class VendorStatsContext:
    total_sales: int
    sales_change: float
    revenue_btc: str
    revenue_xmr: str
    rating: float
    review_count: int
    active_products: int
    total_products: int


@dataclass
class VendorBondContext:
    amount_btc: str
    payment_address: str


@dataclass
class WalletContext:
    balance: str
    available: str
    pending: str
    in_escrow: str


@dataclass
class WalletsContext:
    btc: WalletContext
    xmr: WalletContext


@dataclass
class TransactionContext:
    id: int
    wallet_type: str
    transaction_type: str
    amount: str
    fee: str
    tx_hash: str | None
    status: str
    created_at: str


@dataclass
class ConversationContext:
    id: int
    other_username: str
    last_message: str
    last_message_time: str
    unread_count: int


@dataclass
class MessageContext:
    id: int
    content: str
    is_from_me: bool
    created_at: str


@dataclass
class RelatedOrderContext:
    id: int


@dataclass
class ConversationDetailContext:
    id: int
    other_username: str
    other_user_is_vendor: bool
    other_user_pgp_key: str | None = None
    messages: list[MessageContext] = field(default_factory=list)
    related_order: RelatedOrderContext | None = None


@dataclass
class OrderContext:
    id: int
    buyer_id: int
    buyer_username: str | None
    vendor_id: int
    vendor_name: str
    status: str
    currency: str
    total_amount: str
    item_count: int
    created_at: str
    shipping_method: str


@dataclass
class OrderItemContext:
    product_id: int
    product_title: str
    variant_id: int | None
    variant_title: str | None
    quantity: int
    price_per_unit: str
    total_price: str


@dataclass
class OrderStatusHistoryContext:
    status: str
    notes: str | None
    created_at: str


@dataclass
class OrderDetailContext:
    id: int
    status: str
    currency: str
    currency_name: str
    subtotal: str
    shipping_cost: str
    escrow_fee: str
    total_amount: str
    payment_status: str
    escrow_address: str
    encrypted_shipping_address: str
    shipping_method: str
    estimated_delivery: str
    created_at: str
    vendor: VendorContext
    items: list[OrderItemContext] = field(default_factory=list)
    status_history: list[OrderStatusHistoryContext] = field(default_factory=list)
    review: ReviewContext | None = None
    has_review: bool = False


@dataclass
class LoginHistoryContext:
    timestamp: str
    ip_address: str
    success: bool


@dataclass(kw_only=True)
class HomeTemplate:
    template_path: ClassVar[str] = "pages/home.html"

    user: UserContext | None = None
    current_year: int = field(default_factory=current_year)


@dataclass(kw_only=True)
class LoginTemplate:
    template_path: ClassVar[str] = "pages/login.html"

    user: UserContext | None = None
    current_year: int = field(default_factory=current_year)
    error: str | None = None
    pgp_challenge: str | None = None


@dataclass(kw_only=True)
class RegisterTemplate:
    template_path: ClassVar[str] = "pages/register.html"

    user: UserContext | None = None
    current_year: int = field(default_factory=current_year)
    error: str | None = None


@dataclass(kw_only=True)
class ProductsTemplate:
    template_path: ClassVar[str] = "pages/products.html"

    user: UserContext | None = None
    current_year: int = field(default_factory=current_year)
    products: list[ProductContext]
    categories: list[CategoryContext]
    currency: str
    page: int
    total_pages: int


@dataclass(kw_only=True)
class ProductDetailTemplate:
    template_path: ClassVar[str] = "pages/product_detail.html"

    user: UserContext | None = None
    current_year: int = field(default_factory=current_year)
    product: ProductDetailContext
    currency: str