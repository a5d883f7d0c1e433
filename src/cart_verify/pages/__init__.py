# Pages package - Playwright page objects for the storefront
from .cart_page import CartPage
from .catalog_page import CatalogPage
from .product_page import ProductDetailPage

__all__ = ['CartPage', 'CatalogPage', 'ProductDetailPage']
