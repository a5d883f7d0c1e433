"""
Storefront selectors (Demoblaze layout)
"""

import re

# ========================================
# CATALOG
# ========================================

HOME_TITLE = re.compile(r'STORE')
DEFAULT_CATEGORY = 'Laptops'
PRODUCT_CARDS = '#tbodyid .card'
PRODUCT_TITLE_LINK = '.card-title a'

# ========================================
# PRODUCT DETAIL
# ========================================

PRODUCT_PAGE_URL = '**/prod.html*'
PRODUCT_NAME = '.name'
PRODUCT_PRICE = '.price-container'
ADD_TO_CART_LINK = 'Add to cart'
PRODUCT_ADDED_MESSAGE = 'Product added'

# ========================================
# CART
# ========================================

CART_PAGE_URL = '**/cart.html'
CART_LINK = '#cartur'
CART_ROWS = '#tbodyid > tr'
CART_TOTAL = '#totalp'
ROW_NAME_CELL = 1
ROW_PRICE_CELL = 2
ROW_DELETE_LINK = 'Delete'
