"""Admin REST resources built on the generic resource layer."""

from .article import Article
from .blog import Blog
from .customer import Customer
from .fulfillment import Fulfillment, TrackingInfo
from .order import Order
from .product import Product
from .shop import Shop
from .variant import Variant
from .webhook import Webhook

__all__ = [
    "Article",
    "Blog",
    "Customer",
    "Fulfillment",
    "TrackingInfo",
    "Order",
    "Product",
    "Shop",
    "Variant",
    "Webhook",
]

ALL_RESOURCES = (Article, Blog, Customer, Fulfillment, Order, Product, Shop, Variant, Webhook)
